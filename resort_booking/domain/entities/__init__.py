"""Entities of the booking domain."""

from resort_booking.domain.entities.event import Event, EventSignup, EventSlot
from resort_booking.domain.entities.reservation import (
    BLOCKING_STATUSES,
    GuestDetails,
    Reservation,
    ReservationStatus,
)
from resort_booking.domain.entities.room import Room

__all__ = [
    # Rooms
    "Room",
    "Reservation",
    "ReservationStatus",
    "GuestDetails",
    "BLOCKING_STATUSES",
    # Events
    "Event",
    "EventSlot",
    "EventSignup",
]
