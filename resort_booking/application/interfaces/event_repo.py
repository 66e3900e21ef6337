"""Interface EventRepo - port over events, slots and signups."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from resort_booking.domain.entities.event import Event, EventSignup, EventSlot


@dataclass
class EventWithSlots:
    event: Event
    slots: list[EventSlot] = field(default_factory=list)


@dataclass
class UpcomingSignup:
    signup_id: int
    event_id: int
    title: str
    slot_id: int
    starts_at: datetime
    party_size: int


class EventRepo(ABC):
    @abstractmethod
    async def list_active_with_slots(self) -> list[EventWithSlots]:
        """
        Active events that have at least one active slot.

        Returns:
            Events ordered by id, each with its active slots ordered by id.
        """
        raise NotImplementedError

    @abstractmethod
    async def lock_slot(self, event_id: int, slot_id: int) -> EventSlot | None:
        """
        Read an active slot of an active event and lock it.

        Must run inside a unit of work; the lock is held until it ends.

        Returns:
            The slot, or None if it does not exist, belongs to another event,
            or either the slot or its event is inactive.
        """
        raise NotImplementedError

    @abstractmethod
    async def take_seats(self, slot_id: int, party_size: int) -> bool:
        """
        Decrement ``remaining`` by ``party_size`` if enough seats are left.

        Returns:
            False when the guard ``remaining >= party_size`` failed and nothing
            was changed.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_signup(self, signup: EventSignup) -> int:
        """Insert the signup and return its new id."""
        raise NotImplementedError

    @abstractmethod
    async def list_upcoming_signups(
        self, user_id: int, now: datetime, limit: int
    ) -> list[UpcomingSignup]:
        """The user's signups on active slots starting at or after ``now``, soonest first."""
        raise NotImplementedError
