"""Interfaces (ports) of the application layer."""

from resort_booking.application.interfaces.clock import Clock, FakeClock
from resort_booking.application.interfaces.event_repo import (
    EventRepo,
    EventWithSlots,
    UpcomingSignup,
)
from resort_booking.application.interfaces.reservation_repo import (
    ReservationRepo,
    ReservationSummary,
)
from resort_booking.application.interfaces.room_repo import RoomRepo, RoomTypeAvailability
from resort_booking.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "RoomRepo",
    "RoomTypeAvailability",
    "ReservationRepo",
    "ReservationSummary",
    "EventRepo",
    "EventWithSlots",
    "UpcomingSignup",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "FakeClock",
]
