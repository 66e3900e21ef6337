from datetime import datetime

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from resort_booking.application.interfaces.event_repo import (
    EventRepo,
    EventWithSlots,
    UpcomingSignup,
)
from resort_booking.domain.entities.event import Event, EventSignup, EventSlot
from resort_booking.infrastructure.db.tables import event_signups, event_slots, events


def _row_to_slot(row) -> EventSlot:
    return EventSlot(
        id=row["id"],
        event_id=row["event_id"],
        starts_at=row["starts_at"],
        capacity=row["capacity"],
        remaining=row["remaining"],
        is_active=bool(row["is_active"]),
    )


class EventRepoSQL(EventRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_active_with_slots(self) -> list[EventWithSlots]:
        stmt = (
            select(
                events.c.id.label("event_id"),
                events.c.title,
                events.c.description,
                event_slots.c.id.label("slot_id"),
                event_slots.c.starts_at,
                event_slots.c.capacity,
                event_slots.c.remaining,
            )
            .join(event_slots, event_slots.c.event_id == events.c.id)
            .where(events.c.is_active.is_(True), event_slots.c.is_active.is_(True))
            .order_by(events.c.id, event_slots.c.id)
        )
        result = await self._session.execute(stmt)

        grouped: dict[int, EventWithSlots] = {}
        for row in result.mappings().all():
            entry = grouped.get(row["event_id"])
            if entry is None:
                entry = EventWithSlots(
                    event=Event(
                        id=row["event_id"],
                        title=row["title"],
                        description=row["description"] or "",
                    )
                )
                grouped[row["event_id"]] = entry
            entry.slots.append(
                EventSlot(
                    id=row["slot_id"],
                    event_id=row["event_id"],
                    starts_at=row["starts_at"],
                    capacity=row["capacity"],
                    remaining=row["remaining"],
                )
            )
        return list(grouped.values())

    async def lock_slot(self, event_id: int, slot_id: int) -> EventSlot | None:
        stmt = (
            select(event_slots)
            .join(events, events.c.id == event_slots.c.event_id)
            .where(
                event_slots.c.id == slot_id,
                event_slots.c.event_id == event_id,
                event_slots.c.is_active.is_(True),
                events.c.is_active.is_(True),
            )
            .with_for_update(of=event_slots)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return _row_to_slot(row)

    async def take_seats(self, slot_id: int, party_size: int) -> bool:
        stmt = (
            update(event_slots)
            .where(
                event_slots.c.id == slot_id,
                event_slots.c.remaining >= party_size,
            )
            .values(remaining=event_slots.c.remaining - party_size)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def create_signup(self, signup: EventSignup) -> int:
        stmt = insert(event_signups).values(
            user_id=signup.user_id,
            event_id=signup.event_id,
            slot_id=signup.slot_id,
            first_name=signup.first_name,
            last_name=signup.last_name,
            party_size=signup.party_size,
            created_at=signup.created_at,
        )
        result = await self._session.execute(stmt)
        return result.inserted_primary_key[0]

    async def list_upcoming_signups(
        self, user_id: int, now: datetime, limit: int
    ) -> list[UpcomingSignup]:
        stmt = (
            select(
                event_signups.c.id,
                event_signups.c.party_size,
                events.c.id.label("event_id"),
                events.c.title,
                event_slots.c.id.label("slot_id"),
                event_slots.c.starts_at,
            )
            .join(event_slots, event_slots.c.id == event_signups.c.slot_id)
            .join(events, events.c.id == event_slots.c.event_id)
            .where(
                event_signups.c.user_id == user_id,
                event_slots.c.starts_at >= now,
                event_slots.c.is_active.is_(True),
                events.c.is_active.is_(True),
            )
            .order_by(event_slots.c.starts_at.asc(), event_signups.c.id.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [
            UpcomingSignup(
                signup_id=row["id"],
                event_id=row["event_id"],
                title=row["title"],
                slot_id=row["slot_id"],
                starts_at=row["starts_at"],
                party_size=row["party_size"],
            )
            for row in result.mappings().all()
        ]
