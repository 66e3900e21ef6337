"""Demo catalog for the in-memory backend and the SQL seed script."""

from datetime import datetime, time, timedelta
from decimal import Decimal

from resort_booking.domain.entities.event import Event, EventSlot
from resort_booking.domain.entities.room import Room
from resort_booking.domain.value_objects.money import Money
from resort_booking.infrastructure.in_memory.database import InMemoryDatabase

# (number, type, price, max occupancy, description)
DEMO_ROOMS = [
    ("101", "Standard", "250.00", 2, "Garden view, double bed"),
    ("102", "Standard", "250.00", 2, "Garden view, twin beds"),
    ("103", "Standard", "270.00", 3, "Garden view, double bed and sofa bed"),
    ("201", "Deluxe", "420.00", 3, "Lake view with balcony"),
    ("202", "Deluxe", "440.00", 4, "Lake view, family layout"),
    ("301", "Suite", "780.00", 4, "Top floor suite with private sauna"),
]

# (title, description, [(days ahead, hour, capacity)])
DEMO_EVENTS = [
    (
        "Sunrise yoga",
        "Gentle session on the pier",
        [(1, 7, 12), (2, 7, 12), (3, 7, 12)],
    ),
    (
        "Wine tasting",
        "Regional wines with the sommelier",
        [(2, 19, 16), (5, 19, 16)],
    ),
    (
        "Kayak tour",
        "Guided two-hour tour around the lake",
        [(1, 10, 8), (4, 10, 8)],
    ),
]


def demo_rooms() -> list[Room]:
    return [
        Room(
            id=index,
            number=number,
            room_type=room_type,
            price_per_night=Money(Decimal(price)),
            max_occupancy=max_occupancy,
            description=description,
        )
        for index, (number, room_type, price, max_occupancy, description) in enumerate(
            DEMO_ROOMS, start=1
        )
    ]


def demo_events(now: datetime) -> tuple[list[Event], list[EventSlot]]:
    events: list[Event] = []
    slots: list[EventSlot] = []
    slot_id = 1
    for event_id, (title, description, schedule) in enumerate(DEMO_EVENTS, start=1):
        events.append(Event(id=event_id, title=title, description=description))
        for days_ahead, hour, capacity in schedule:
            starts_at = datetime.combine(now.date() + timedelta(days=days_ahead), time(hour))
            slots.append(
                EventSlot(
                    id=slot_id,
                    event_id=event_id,
                    starts_at=starts_at,
                    capacity=capacity,
                    remaining=capacity,
                )
            )
            slot_id += 1
    return events, slots


def seed_demo_catalog(database: InMemoryDatabase, now: datetime) -> None:
    """Load the demo rooms, events and slots; slot dates are relative to ``now``."""
    for room in demo_rooms():
        database.add_room(room)
    events, slots = demo_events(now)
    for event in events:
        database.add_event(event)
    for slot in slots:
        database.add_slot(slot)
