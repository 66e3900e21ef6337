from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from resort_booking.api.deps import get_sessionmaker
from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.use_cases.book_room import BookRoomUseCase
from resort_booking.application.use_cases.get_dashboard import GetDashboardUseCase
from resort_booking.application.use_cases.list_events import ListEventsUseCase
from resort_booking.application.use_cases.list_my_event_signups import ListMyEventSignupsUseCase
from resort_booking.application.use_cases.list_my_reservations import ListMyReservationsUseCase
from resort_booking.application.use_cases.search_availability import SearchAvailabilityUseCase
from resort_booking.application.use_cases.signup_for_event import SignupForEventUseCase
from resort_booking.config import Settings, get_settings
from resort_booking.domain.errors import AuthRequiredError
from resort_booking.infrastructure.db.repositories.event_repo_sql import EventRepoSQL
from resort_booking.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from resort_booking.infrastructure.db.repositories.room_repo_sql import RoomRepoSQL
from resort_booking.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from resort_booking.infrastructure.in_memory.database import InMemoryDatabase, InMemorySession
from resort_booking.infrastructure.in_memory.event_repo import InMemoryEventRepo
from resort_booking.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from resort_booking.infrastructure.in_memory.room_repo import InMemoryRoomRepo
from resort_booking.infrastructure.in_memory.seed import seed_demo_catalog
from resort_booking.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from resort_booking.infrastructure.services.clock_impl import ClockImpl


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    return ClockImpl()


@lru_cache(maxsize=1)
def get_in_memory_database() -> InMemoryDatabase:
    settings = get_settings()
    database = InMemoryDatabase(lock_timeout_seconds=settings.lock_timeout_seconds)
    if settings.seed_demo_data:
        seed_demo_catalog(database, get_clock().now())
    return database


async def get_session(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AsyncSession | InMemorySession, None]:
    if settings.use_in_memory:
        yield InMemorySession(get_in_memory_database())
        return
    async with get_sessionmaker()() as session:
        yield session


def get_current_user_id(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> int:
    """Identity forwarded by the upstream auth layer in a trusted header."""
    raw = (request.headers.get(settings.user_id_header) or "").strip()
    try:
        user_id = int(raw)
    except ValueError:
        raise AuthRequiredError() from None
    if user_id < 1:
        raise AuthRequiredError()
    return user_id


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | InMemorySession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    if isinstance(session, InMemorySession):
        room_repo = InMemoryRoomRepo(session)
        reservation_repo = InMemoryReservationRepo(session)
        event_repo = InMemoryEventRepo(session)
        tx_manager = InMemoryTransactionManager(session)
    else:
        room_repo = RoomRepoSQL(session)
        reservation_repo = ReservationRepoSQL(session)
        event_repo = EventRepoSQL(session)
        tx_manager = SQLAlchemyTransactionManager(
            session,
            isolation_level=settings.booking_isolation_level,
            lock_timeout_seconds=settings.lock_timeout_seconds,
        )

    return {
        "search_availability": SearchAvailabilityUseCase(
            room_repo=room_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "book_room": BookRoomUseCase(
            room_repo=room_repo,
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "list_my_reservations": ListMyReservationsUseCase(
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            limit=settings.my_reservations_limit,
        ),
        "list_events": ListEventsUseCase(
            event_repo=event_repo,
            transaction_manager=tx_manager,
        ),
        "signup_for_event": SignupForEventUseCase(
            event_repo=event_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "list_my_event_signups": ListMyEventSignupsUseCase(
            event_repo=event_repo,
            transaction_manager=tx_manager,
            clock=clock,
            limit=settings.upcoming_signups_limit,
        ),
        "dashboard": GetDashboardUseCase(
            reservation_repo=reservation_repo,
            event_repo=event_repo,
            transaction_manager=tx_manager,
            clock=clock,
            limit=settings.upcoming_signups_limit,
        ),
    }
