"""Fake clock implementation for testing.

FakeTime returns a fixed instant and counts how often it was read.
"""

from scrape_ops.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake returning a constructor-provided instant.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, now: int = 1_700_000_000) -> None:
        """Create FakeTime frozen at ``now`` epoch seconds."""
        self._now = now
        self._read_count = 0

    @property
    def read_count(self) -> int:
        """Number of epoch_seconds() calls, for test assertions."""
        return self._read_count

    def epoch_seconds(self) -> int:
        self._read_count += 1
        return self._now
