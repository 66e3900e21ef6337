"""Room entity - a bookable physical unit of the catalog."""

from dataclasses import dataclass

from resort_booking.domain.value_objects.money import Money


@dataclass(frozen=True)
class Room:
    """
    A physical room.

    Rooms are grouped by ``room_type`` ("Standard", "Deluxe", ...); the type
    is only a grouping key, it has no record of its own.
    """

    id: int
    number: str
    room_type: str
    price_per_night: Money
    max_occupancy: int
    description: str = ""
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.max_occupancy < 1:
            raise ValueError(f"max_occupancy must be >= 1: {self.max_occupancy}")

    def can_host(self, guests: int) -> bool:
        """Active and large enough for ``guests`` people."""
        return self.is_active and self.max_occupancy >= guests

    @property
    def sort_key(self) -> tuple:
        """Allocation order: cheapest first, then lowest id."""
        return (self.price_per_night.amount, self.id)
