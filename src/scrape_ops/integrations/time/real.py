"""Real clock implementation using time.time()."""

import time

from scrape_ops.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def epoch_seconds(self) -> int:
        """Return the system clock truncated to whole seconds."""
        return int(time.time())
