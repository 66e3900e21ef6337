"""Infrastructure services."""

from resort_booking.infrastructure.services.clock_impl import ClockImpl

__all__ = ["ClockImpl"]
