from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from resort_booking.domain.entities.reservation import Reservation
from resort_booking.domain.value_objects.stay_range import StayRange


@dataclass
class ReservationSummary:
    reservation_id: int
    check_in: date
    check_out: date
    adults: int
    children: int
    total_price: Decimal
    status: str
    room_type: str
    room_number: str
    created_at: datetime | None = None


class ReservationRepo(ABC):
    @abstractmethod
    async def find_conflicting_room_ids(
        self, room_ids: Sequence[int], stay: StayRange
    ) -> set[int]:
        """Ids among ``room_ids`` holding a PENDING/CONFIRMED reservation overlapping ``stay``."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, reservation: Reservation) -> int:
        """Insert the reservation and return its new id."""
        raise NotImplementedError

    @abstractmethod
    async def list_recent_for_user(self, user_id: int, limit: int) -> list[ReservationSummary]:
        """The user's reservations, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_check_in_for_user(
        self, user_id: int, limit: int
    ) -> list[ReservationSummary]:
        """The user's reservations, earliest check-in first."""
        raise NotImplementedError
