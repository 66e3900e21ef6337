"""Interface RoomRepo - port over the room catalog."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from resort_booking.domain.entities.room import Room
from resort_booking.domain.value_objects.stay_range import StayRange


@dataclass
class RoomTypeAvailability:
    """One row of the availability search, per room type."""

    room_type: str
    min_price: Decimal
    max_capacity: int
    description: str
    total_rooms: int
    available_rooms: int


class RoomRepo(ABC):
    @abstractmethod
    async def search_availability(
        self, stay: StayRange, guests: int
    ) -> list[RoomTypeAvailability]:
        """
        Count rooms per type for a stay, without taking any lock.

        Only active rooms with ``max_occupancy >= guests`` are counted. A room
        is available when no PENDING/CONFIRMED reservation overlaps ``stay``.

        Returns:
            Rows ordered by min_price ascending, then room_type.
        """
        raise NotImplementedError

    @abstractmethod
    async def room_type_exists(self, room_type: str) -> bool:
        """Whether at least one active room has this type."""
        raise NotImplementedError

    @abstractmethod
    async def lock_candidate_rooms(self, room_type: str, guests: int) -> list[Room]:
        """
        Lock every active room of ``room_type`` able to host ``guests``.

        Must run inside a unit of work. Rows come back ordered by
        (price_per_night, id) and stay locked until the unit of work ends, so
        two transactions competing for the same room are serialized.
        """
        raise NotImplementedError
