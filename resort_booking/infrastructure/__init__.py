"""
Infrastructure layer - resort booking engine.

Concrete implementations of the application ports.

Layout:
- db/: SQLAlchemy tables, engine, SQL repositories, transaction manager, retry
- in_memory/: in-process datastore with row locks, used by default and in tests
- services/: infrastructure services (Clock)
"""

from resort_booking.infrastructure.db.repositories.event_repo_sql import EventRepoSQL
from resort_booking.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from resort_booking.infrastructure.db.repositories.room_repo_sql import RoomRepoSQL
from resort_booking.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from resort_booking.infrastructure.in_memory import (
    InMemoryDatabase,
    InMemoryEventRepo,
    InMemoryReservationRepo,
    InMemoryRoomRepo,
    InMemorySession,
    InMemoryTransactionManager,
)
from resort_booking.infrastructure.services.clock_impl import ClockImpl

__all__ = [
    # Database - Repositories SQL
    "RoomRepoSQL",
    "ReservationRepoSQL",
    "EventRepoSQL",
    "SQLAlchemyTransactionManager",
    # In-Memory Implementations
    "InMemoryDatabase",
    "InMemorySession",
    "InMemoryRoomRepo",
    "InMemoryReservationRepo",
    "InMemoryEventRepo",
    "InMemoryTransactionManager",
    # Services
    "ClockImpl",
]
