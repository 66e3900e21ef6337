"""Interface Clock - port over the system time."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta


class Clock(ABC):
    """
    Port over the system time.

    Booking dates are calendar dates in the resort's local time, so ``today``
    is the start of the current *local* day.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current local wall-clock time (naive)."""
        raise NotImplementedError

    @abstractmethod
    def today(self) -> date:
        """Current local calendar date."""
        raise NotImplementedError


class FakeClock(Clock):
    """
    Fixed clock for deterministic tests.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now()

    def now(self) -> datetime:
        return self._fixed_time

    def today(self) -> date:
        return self._fixed_time.date()

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def advance(self, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> None:
        delta = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        self._fixed_time = self._fixed_time + delta
