"""Time operations abstraction for testing.

This module provides an ABC for the wall clock and for sleeping to enable
deterministic tests: backup file names are derived from now(), and the
clipboard paste waits briefly for the compositor before typing.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
