"""Clock abstraction.

Every timestamp written by the ingestion pipeline (term creation, definition
creation, tag merges, term writes) comes from one injected Clock.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        ...


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)
