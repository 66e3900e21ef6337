"""DTOs (Data Transfer Objects) of the application layer."""

from resort_booking.application.dtos.event_dto import (
    DashboardDTO,
    SignupConfirmationDTO,
    SignupForEventDTO,
)
from resort_booking.application.dtos.room_dto import (
    BookingConfirmationDTO,
    BookRoomDTO,
    SearchAvailabilityDTO,
)

__all__ = [
    # Room DTOs
    "SearchAvailabilityDTO",
    "BookRoomDTO",
    "BookingConfirmationDTO",
    # Event DTOs
    "SignupForEventDTO",
    "SignupConfirmationDTO",
    "DashboardDTO",
]
