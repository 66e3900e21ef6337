"""Recreate the SQL schema and load the demo catalog."""

import asyncio
from datetime import datetime

from sqlalchemy import insert

from resort_booking.api.deps import get_engine
from resort_booking.infrastructure.db.tables import event_slots, events, metadata, rooms
from resort_booking.infrastructure.in_memory.seed import demo_events, demo_rooms


async def seed():
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
        print("Recreated all tables.")

        await conn.execute(
            insert(rooms),
            [
                {
                    "id": room.id,
                    "number": room.number,
                    "room_type": room.room_type,
                    "description": room.description,
                    "price_per_night": room.price_per_night.amount,
                    "max_occupancy": room.max_occupancy,
                    "is_active": room.is_active,
                }
                for room in demo_rooms()
            ],
        )

        event_rows, slot_rows = demo_events(datetime.now())
        await conn.execute(
            insert(events),
            [
                {"id": e.id, "title": e.title, "description": e.description, "is_active": True}
                for e in event_rows
            ],
        )
        await conn.execute(
            insert(event_slots),
            [
                {
                    "id": s.id,
                    "event_id": s.event_id,
                    "starts_at": s.starts_at,
                    "capacity": s.capacity,
                    "remaining": s.remaining,
                    "is_active": True,
                }
                for s in slot_rows
            ],
        )
        print(f"Seeded {len(demo_rooms())} rooms, {len(event_rows)} events, {len(slot_rows)} slots.")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
