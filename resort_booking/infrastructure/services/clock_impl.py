"""System clock."""

from datetime import date, datetime

from resort_booking.application.interfaces.clock import Clock


class ClockImpl(Clock):
    """
    Clock backed by the system time.

    Stays and slot times are resort-local wall-clock values, so both methods
    return naive local time. For testing use FakeClock from
    application.interfaces.clock.
    """

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return date.today()
