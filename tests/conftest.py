"""
Pytest configuration and shared fixtures.

Provides:
- A fixed clock so "today" and "upcoming" are deterministic
- A small, seeded in-memory catalog and use-case factories over it
- A file-backed SQLite database with the same catalog for SQL tests
- A FastAPI TestClient wired to the in-memory catalog
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from resort_booking.api.dependencies import get_clock, get_session
from resort_booking.application.interfaces.clock import FakeClock
from resort_booking.application.use_cases.book_room import BookRoomUseCase
from resort_booking.application.use_cases.get_dashboard import GetDashboardUseCase
from resort_booking.application.use_cases.list_events import ListEventsUseCase
from resort_booking.application.use_cases.list_my_event_signups import ListMyEventSignupsUseCase
from resort_booking.application.use_cases.list_my_reservations import ListMyReservationsUseCase
from resort_booking.application.use_cases.search_availability import SearchAvailabilityUseCase
from resort_booking.application.use_cases.signup_for_event import SignupForEventUseCase
from resort_booking.domain.entities.event import Event, EventSlot
from resort_booking.domain.entities.room import Room
from resort_booking.domain.value_objects.money import Money
from resort_booking.infrastructure.db.engine import enable_sqlite_write_locks
from resort_booking.infrastructure.db.repositories.event_repo_sql import EventRepoSQL
from resort_booking.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from resort_booking.infrastructure.db.repositories.room_repo_sql import RoomRepoSQL
from resort_booking.infrastructure.db.tables import event_slots, events, metadata, rooms
from resort_booking.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from resort_booking.infrastructure.in_memory.database import InMemoryDatabase, InMemorySession
from resort_booking.infrastructure.in_memory.event_repo import InMemoryEventRepo
from resort_booking.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from resort_booking.infrastructure.in_memory.room_repo import InMemoryRoomRepo
from resort_booking.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from resort_booking.main import app

# Wednesday morning; every test date is relative to it
NOW = datetime(2030, 6, 5, 9, 0, 0)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: runs against a real SQL engine")
    config.addinivalue_line("markers", "slow: takes noticeably longer than the rest")
    config.addinivalue_line("markers", "concurrency: fires competing requests at one resource")


# ============================================================================
# CATALOG
# ============================================================================

def catalog_rooms() -> list[Room]:
    return [
        Room(1, "101", "Standard", Money(Decimal("200.00")), 2, "Garden view"),
        Room(2, "102", "Standard", Money(Decimal("200.00")), 2, "Courtyard view"),
        Room(3, "103", "Standard", Money(Decimal("180.00")), 3, "Ground floor"),
        Room(4, "201", "Deluxe", Money(Decimal("350.00")), 4, "Lake view"),
        Room(5, "901", "Standard", Money(Decimal("90.00")), 4, "Closed for works", is_active=False),
        Room(6, "301", "Single", Money(Decimal("100.00")), 2, "Single room"),
    ]


def catalog_events(now: datetime) -> tuple[list[Event], list[EventSlot]]:
    event_rows = [
        Event(1, "Sunrise yoga", "On the pier"),
        Event(2, "Cancelled gala", "No longer offered", is_active=False),
        Event(3, "Kayak tour", "Two hours"),
    ]
    slot_rows = [
        EventSlot(1, 1, now + timedelta(days=1), capacity=10, remaining=10),
        EventSlot(2, 1, now - timedelta(days=1), capacity=5, remaining=5),
        EventSlot(3, 2, now + timedelta(days=2), capacity=5, remaining=5),
        EventSlot(4, 3, now + timedelta(hours=3), capacity=3, remaining=3),
        EventSlot(5, 3, now + timedelta(days=3), capacity=3, remaining=3, is_active=False),
    ]
    return event_rows, slot_rows


def seed_catalog(database: InMemoryDatabase, now: datetime) -> None:
    for room in catalog_rooms():
        database.add_room(room)
    event_rows, slot_rows = catalog_events(now)
    for event in event_rows:
        database.add_event(event)
    for slot in slot_rows:
        database.add_slot(slot)


@dataclass
class UseCaseSet:
    search: SearchAvailabilityUseCase
    book: BookRoomUseCase
    my_reservations: ListMyReservationsUseCase
    events: ListEventsUseCase
    signup: SignupForEventUseCase
    my_signups: ListMyEventSignupsUseCase
    dashboard: GetDashboardUseCase


def build_use_cases(room_repo, reservation_repo, event_repo, tx_manager, clock) -> UseCaseSet:
    return UseCaseSet(
        search=SearchAvailabilityUseCase(room_repo, tx_manager, clock),
        book=BookRoomUseCase(room_repo, reservation_repo, tx_manager, clock),
        my_reservations=ListMyReservationsUseCase(reservation_repo, tx_manager),
        events=ListEventsUseCase(event_repo, tx_manager),
        signup=SignupForEventUseCase(event_repo, tx_manager, clock),
        my_signups=ListMyEventSignupsUseCase(event_repo, tx_manager, clock),
        dashboard=GetDashboardUseCase(reservation_repo, event_repo, tx_manager, clock),
    )


def in_memory_use_cases(database: InMemoryDatabase, clock: FakeClock) -> UseCaseSet:
    """One request's worth of use cases: a fresh session over the shared database."""
    session = InMemorySession(database)
    return build_use_cases(
        InMemoryRoomRepo(session),
        InMemoryReservationRepo(session),
        InMemoryEventRepo(session),
        InMemoryTransactionManager(session),
        clock,
    )


def sql_use_cases(session: AsyncSession, clock: FakeClock) -> UseCaseSet:
    return build_use_cases(
        RoomRepoSQL(session),
        ReservationRepoSQL(session),
        EventRepoSQL(session),
        SQLAlchemyTransactionManager(session, lock_timeout_seconds=5.0),
        clock,
    )


# ============================================================================
# IN-MEMORY FIXTURES
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    database = InMemoryDatabase(lock_timeout_seconds=2.0)
    seed_catalog(database, NOW)
    return database


@pytest.fixture
def use_cases(memory_db: InMemoryDatabase, clock: FakeClock) -> UseCaseSet:
    return in_memory_use_cases(memory_db, clock)


# ============================================================================
# SQL FIXTURES
# ============================================================================

@pytest_asyncio.fixture
async def sqlite_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    File-backed SQLite database seeded with the test catalog.

    A file (not ``:memory:``) so that concurrent sessions get their own
    connections and really compete for the write lock.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'resort_test.db'}",
        connect_args={"timeout": 5},
    )
    enable_sqlite_write_locks(engine)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(
            insert(rooms),
            [
                {
                    "id": r.id,
                    "number": r.number,
                    "room_type": r.room_type,
                    "description": r.description,
                    "price_per_night": r.price_per_night.amount,
                    "max_occupancy": r.max_occupancy,
                    "is_active": r.is_active,
                }
                for r in catalog_rooms()
            ],
        )
        event_rows, slot_rows = catalog_events(NOW)
        await conn.execute(
            insert(events),
            [
                {"id": e.id, "title": e.title, "description": e.description, "is_active": e.is_active}
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
                    "is_active": s.is_active,
                }
                for s in slot_rows
            ],
        )

    yield engine

    await engine.dispose()


@pytest.fixture
def sqlite_sessionmaker(sqlite_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(sqlite_engine, class_=AsyncSession, expire_on_commit=False)


# ============================================================================
# HTTP CLIENT
# ============================================================================

@pytest.fixture
def client(memory_db: InMemoryDatabase, clock: FakeClock) -> Generator[TestClient, None, None]:
    """TestClient over the in-memory catalog with a fixed clock."""

    async def override_get_session():
        yield InMemorySession(memory_db)

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_clock] = lambda: clock

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": "42"}
