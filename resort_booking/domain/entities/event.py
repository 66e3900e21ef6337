"""Entities for activities with capacity-limited time slots."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Event:
    id: int
    title: str
    description: str = ""
    is_active: bool = True


@dataclass
class EventSlot:
    """
    A scheduled occurrence of an Event.

    ``remaining`` is the only mutable field and it only goes down:
    ``0 <= remaining <= capacity`` holds at all times.
    """

    id: int
    event_id: int
    starts_at: datetime
    capacity: int
    remaining: int
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"capacity cannot be negative: {self.capacity}")
        if not 0 <= self.remaining <= self.capacity:
            raise ValueError(
                f"remaining must be between 0 and {self.capacity}: {self.remaining}"
            )

    @property
    def taken(self) -> int:
        return self.capacity - self.remaining

    def has_room_for(self, party_size: int) -> bool:
        return self.remaining >= party_size

    def take(self, party_size: int) -> None:
        if party_size < 1:
            raise ValueError(f"party_size must be >= 1: {party_size}")
        if not self.has_room_for(party_size):
            raise ValueError(
                f"slot {self.id} has {self.remaining} seats left, {party_size} requested"
            )
        self.remaining -= party_size


@dataclass(frozen=True)
class EventSignup:
    """A party admitted to a slot. Immutable once created."""

    user_id: int
    event_id: int
    slot_id: int
    first_name: str
    last_name: str
    party_size: int
    id: int | None = None
    created_at: datetime | None = None
