"""DTOs for event signups and the user dashboard."""

from dataclasses import dataclass, field
from typing import Any

from resort_booking.application.interfaces.event_repo import UpcomingSignup
from resort_booking.application.interfaces.reservation_repo import ReservationSummary


@dataclass
class SignupForEventDTO:
    slot_id: Any
    party_size: Any
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class SignupConfirmationDTO:
    signup_id: int
    event_id: int
    slot_id: int
    party_size: int
    remaining: int


@dataclass
class DashboardDTO:
    reservations: list[ReservationSummary] = field(default_factory=list)
    events: list[UpcomingSignup] = field(default_factory=list)
