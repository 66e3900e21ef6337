import asyncio
import dataclasses
from datetime import datetime

from resort_booking.application.interfaces.event_repo import (
    EventRepo,
    EventWithSlots,
    UpcomingSignup,
)
from resort_booking.domain.entities.event import EventSignup, EventSlot
from resort_booking.infrastructure.in_memory.database import InMemorySession


class InMemoryEventRepo(EventRepo):
    def __init__(self, session: InMemorySession) -> None:
        self._session = session

    @property
    def _db(self):
        return self._session.database

    def _bookable(self, slot: EventSlot) -> bool:
        event = self._db.events.get(slot.event_id)
        return slot.is_active and event is not None and event.is_active

    async def list_active_with_slots(self) -> list[EventWithSlots]:
        await asyncio.sleep(0)
        grouped: dict[int, EventWithSlots] = {}
        for slot in sorted(self._db.slots.values(), key=lambda s: s.id):
            if not self._bookable(slot):
                continue
            entry = grouped.setdefault(
                slot.event_id, EventWithSlots(event=self._db.events[slot.event_id])
            )
            entry.slots.append(dataclasses.replace(slot))
        return [grouped[event_id] for event_id in sorted(grouped)]

    async def lock_slot(self, event_id: int, slot_id: int) -> EventSlot | None:
        slot = self._db.slots.get(slot_id)
        if slot is None or slot.event_id != event_id or not self._bookable(slot):
            return None
        await self._session.lock(("slot", slot_id))
        # copy so callers never see later changes to the stored row
        return dataclasses.replace(self._db.slots[slot_id])

    async def take_seats(self, slot_id: int, party_size: int) -> bool:
        await asyncio.sleep(0)
        slot = self._db.slots.get(slot_id)
        if slot is None or not slot.has_room_for(party_size):
            return False
        previous = slot.remaining
        slot.take(party_size)

        def restore() -> None:
            slot.remaining = previous

        self._session.record_undo(restore)
        return True

    async def create_signup(self, signup: EventSignup) -> int:
        await asyncio.sleep(0)
        signup_id = self._db.next_id("event_signups")
        self._db.signups[signup_id] = dataclasses.replace(signup, id=signup_id)
        self._session.record_undo(lambda: self._db.signups.pop(signup_id, None))
        return signup_id

    async def list_upcoming_signups(
        self, user_id: int, now: datetime, limit: int
    ) -> list[UpcomingSignup]:
        await asyncio.sleep(0)
        rows = []
        for signup in self._db.signups.values():
            slot = self._db.slots.get(signup.slot_id)
            if signup.user_id != user_id or slot is None or not self._bookable(slot):
                continue
            if slot.starts_at < now:
                continue
            rows.append(
                UpcomingSignup(
                    signup_id=signup.id,
                    event_id=slot.event_id,
                    title=self._db.events[slot.event_id].title,
                    slot_id=slot.id,
                    starts_at=slot.starts_at,
                    party_size=signup.party_size,
                )
            )
        rows.sort(key=lambda row: (row.starts_at, row.signup_id))
        return rows[:limit]
