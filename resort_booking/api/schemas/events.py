from datetime import datetime

from pydantic import BaseModel, ConfigDict

from resort_booking.api.schemas.rooms import ReservationSummaryResponse


class EventSlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    starts_at: datetime
    capacity: int
    remaining: int


class EventResponse(BaseModel):
    id: int
    title: str
    description: str
    slots: list[EventSlotResponse]


class EventsResponse(BaseModel):
    events: list[EventResponse]


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slot_id: int
    party_size: int
    first_name: str
    last_name: str


class SignupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    signup_id: int
    event_id: int
    slot_id: int
    party_size: int
    remaining: int


class UpcomingSignupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    signup_id: int
    event_id: int
    title: str
    slot_id: int
    starts_at: datetime
    party_size: int


class MyEventSignupsResponse(BaseModel):
    items: list[UpcomingSignupResponse]


class DashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservations: list[ReservationSummaryResponse]
    events: list[UpcomingSignupResponse]
