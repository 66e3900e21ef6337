"""Reservation entity - occupancy of one room for a stay."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from resort_booking.domain.value_objects.money import Money
from resort_booking.domain.value_objects.occupancy import Occupancy
from resort_booking.domain.value_objects.stay_range import StayRange


class ReservationStatus(str, Enum):
    """Reservation states. The engine only ever writes CONFIRMED."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


# Statuses that keep a room occupied for the nights of the stay.
BLOCKING_STATUSES = (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)


@dataclass(frozen=True)
class GuestDetails:
    """Trimmed guest contact data attached to a reservation."""

    first_name: str
    last_name: str
    phone: str = ""
    notes: str = ""


@dataclass
class Reservation:
    """
    Append-only fact: ``room_id`` is taken for ``stay``.

    Created only by the room booking use case; never updated afterwards.
    """

    user_id: int
    room_id: int
    stay: StayRange
    occupancy: Occupancy
    total_price: Money
    guest: GuestDetails
    status: ReservationStatus = ReservationStatus.CONFIRMED
    id: int | None = None
    created_at: datetime | None = None

    @property
    def blocks_room(self) -> bool:
        return self.status in BLOCKING_STATUSES

    def collides_with(self, stay: StayRange) -> bool:
        """Whether this reservation keeps the room from being booked for ``stay``."""
        return self.blocks_room and self.stay.overlaps_with(stay)
