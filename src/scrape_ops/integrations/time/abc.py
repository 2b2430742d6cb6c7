"""Clock abstraction for testing.

The scratch space stamps ``updated.json`` with the current epoch seconds.
Going through this ABC lets tests pin the clock instead of racing it.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def epoch_seconds(self) -> int:
        """Return the current time as whole seconds since the Unix epoch."""
        ...
