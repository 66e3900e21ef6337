"""DTOs for room search and booking."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any


@dataclass
class SearchAvailabilityDTO:
    """Raw search input; dates may still be strings."""

    date_from: date | str
    date_to: date | str
    guests: Any = 1


@dataclass
class BookRoomDTO:
    """Raw booking input as received from the caller."""

    room_type: str
    date_from: date | str
    date_to: date | str
    adults: Any = 1
    children: Any = 0
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    notes: str | None = None


@dataclass
class BookingConfirmationDTO:
    reservation_id: int
    room_id: int
    room_number: str
    room_type: str
    check_in: date
    check_out: date
    nights: int
    total: Decimal
    status: str = "CONFIRMED"
