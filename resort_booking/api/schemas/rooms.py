from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class RoomTypeAvailabilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_type: str
    min_price: Decimal
    max_capacity: int
    description: str
    total_rooms: int
    available_rooms: int


class SearchRoomsResponse(BaseModel):
    items: list[RoomTypeAvailabilityResponse]


class BookRoomRequest(BaseModel):
    """
    Booking form. Dates stay strings here; the booking engine owns their
    validation so a bad range is a 400 with a field name, not a 422.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    room_type: str
    date_from: str = Field(alias="from")
    date_to: str = Field(alias="to")
    adults: int = 1
    children: int = 0
    first_name: str
    last_name: str
    phone: str | None = None
    notes: str | None = None


class BookRoomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: int
    room_id: int
    room_number: str
    room_type: str
    check_in: date
    check_out: date
    nights: int
    total: Decimal
    status: str


class ReservationSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: int
    room_type: str
    room_number: str
    check_in: date
    check_out: date
    adults: int
    children: int
    total_price: Decimal
    status: str
    created_at: datetime | None = None


class MyReservationsResponse(BaseModel):
    items: list[ReservationSummaryResponse]
