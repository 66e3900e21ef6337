"""In-memory implementations of the repositories, used by default and in tests."""

from resort_booking.infrastructure.in_memory.database import (
    InMemoryDatabase,
    InMemorySession,
    KeyedLockTable,
)
from resort_booking.infrastructure.in_memory.event_repo import InMemoryEventRepo
from resort_booking.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from resort_booking.infrastructure.in_memory.room_repo import InMemoryRoomRepo
from resort_booking.infrastructure.in_memory.seed import seed_demo_catalog
from resort_booking.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager

__all__ = [
    # Storage
    "InMemoryDatabase",
    "InMemorySession",
    "KeyedLockTable",
    # Repositories
    "InMemoryRoomRepo",
    "InMemoryReservationRepo",
    "InMemoryEventRepo",
    # Infrastructure
    "InMemoryTransactionManager",
    "seed_demo_catalog",
]
