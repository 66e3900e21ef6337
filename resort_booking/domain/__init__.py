"""
Domain layer - resort booking engine.

Pure business rules, no framework dependencies.

Layout:
- entities/: Room, Reservation, Event, EventSlot, EventSignup
- value_objects/: immutable values (Money, StayRange, Occupancy)
- errors.py: domain exception hierarchy
"""

from resort_booking.domain.entities import (
    BLOCKING_STATUSES,
    Event,
    EventSignup,
    EventSlot,
    GuestDetails,
    Reservation,
    ReservationStatus,
    Room,
)
from resort_booking.domain.errors import (
    AuthRequiredError,
    CapacityConflictError,
    DomainError,
    EventSlotNotFoundError,
    InfrastructureError,
    InsufficientSeatsError,
    InvalidDateRangeError,
    NoRoomAvailableError,
    NotFoundError,
    RoomTypeNotFoundError,
    ValidationError,
)
from resort_booking.domain.value_objects import Money, Occupancy, StayRange

__all__ = [
    # Entities
    "Room",
    "Reservation",
    "ReservationStatus",
    "GuestDetails",
    "BLOCKING_STATUSES",
    "Event",
    "EventSlot",
    "EventSignup",
    # Value Objects
    "Money",
    "Occupancy",
    "StayRange",
    # Errors
    "DomainError",
    "ValidationError",
    "InvalidDateRangeError",
    "NotFoundError",
    "RoomTypeNotFoundError",
    "EventSlotNotFoundError",
    "CapacityConflictError",
    "NoRoomAvailableError",
    "InsufficientSeatsError",
    "AuthRequiredError",
    "InfrastructureError",
]
