"""
Application layer - resort booking engine.

Use cases, DTOs and the ports (interfaces) the infrastructure implements.

Layout:
- use_cases/: one class per operation, each with an ``execute`` coroutine
- dtos/: data transfer objects in and out of the use cases
- interfaces/: repository, transaction and clock ports
- validation.py: range & guest validation, run before any datastore access
"""

from resort_booking.application.dtos import (
    BookingConfirmationDTO,
    BookRoomDTO,
    DashboardDTO,
    SearchAvailabilityDTO,
    SignupConfirmationDTO,
    SignupForEventDTO,
)
from resort_booking.application.interfaces import (
    Clock,
    EventRepo,
    EventWithSlots,
    FakeClock,
    ReservationRepo,
    ReservationSummary,
    RoomRepo,
    RoomTypeAvailability,
    TransactionManager,
    UpcomingSignup,
)

__all__ = [
    # DTOs
    "SearchAvailabilityDTO",
    "BookRoomDTO",
    "BookingConfirmationDTO",
    "SignupForEventDTO",
    "SignupConfirmationDTO",
    "DashboardDTO",
    # Interfaces - Repositories
    "RoomRepo",
    "RoomTypeAvailability",
    "ReservationRepo",
    "ReservationSummary",
    "EventRepo",
    "EventWithSlots",
    "UpcomingSignup",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "FakeClock",
]
