"""
Shared in-memory datastore.

``InMemoryDatabase`` holds the tables for the whole process; each request
works through its own ``InMemorySession``, which acquires per-row locks from
the database's ``KeyedLockTable`` and keeps them until its unit of work ends.
"""

import asyncio
import itertools
import logging
from collections.abc import Callable, Hashable

from resort_booking.domain.entities.event import Event, EventSignup, EventSlot
from resort_booking.domain.entities.reservation import Reservation
from resort_booking.domain.entities.room import Room
from resort_booking.domain.errors import InfrastructureError

logger = logging.getLogger(__name__)


class KeyedLockTable:
    """One ``asyncio.Lock`` per key, e.g. ``("room", 7)``, created on first use."""

    def __init__(self, timeout_seconds: float = 5.0) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._timeout_seconds = timeout_seconds

    async def acquire(self, key: Hashable) -> asyncio.Lock:
        lock = self._locks.setdefault(key, asyncio.Lock())
        try:
            await asyncio.wait_for(lock.acquire(), timeout=self._timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Lock wait timed out",
                extra={"lock_key": str(key), "timeout_seconds": self._timeout_seconds},
            )
            raise InfrastructureError(
                f"Timed out waiting for lock on {key}", transient=True
            ) from None
        return lock

    def is_locked(self, key: Hashable) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()


class InMemoryDatabase:
    def __init__(self, lock_timeout_seconds: float = 5.0) -> None:
        self.rooms: dict[int, Room] = {}
        self.reservations: dict[int, Reservation] = {}
        self.events: dict[int, Event] = {}
        self.slots: dict[int, EventSlot] = {}
        self.signups: dict[int, EventSignup] = {}
        self.locks = KeyedLockTable(lock_timeout_seconds)
        self._sequences: dict[str, itertools.count] = {}

    def next_id(self, table: str) -> int:
        return next(self._sequences.setdefault(table, itertools.count(1)))

    def add_room(self, room: Room) -> Room:
        self.rooms[room.id] = room
        return room

    def add_event(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def add_slot(self, slot: EventSlot) -> EventSlot:
        if slot.event_id not in self.events:
            raise ValueError(f"Unknown event {slot.event_id}")
        self.slots[slot.id] = slot
        return slot


class InMemorySession:
    """
    Per-request handle on an ``InMemoryDatabase``.

    Locks taken inside a unit of work are released when it ends; writes
    register an undo action so a rollback leaves the tables untouched.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database
        self._held: dict[Hashable, asyncio.Lock] = {}
        self._undo: list[Callable[[], None]] = []
        self._active = False

    def in_transaction(self) -> bool:
        return self._active

    def begin(self) -> None:
        if self._active:
            raise RuntimeError("Session already in a transaction")
        self._active = True

    async def lock(self, key: Hashable) -> None:
        if not self._active:
            raise RuntimeError("Row locks require an open unit of work")
        if key in self._held:
            return
        self._held[key] = await self.database.locks.acquire(key)

    def record_undo(self, action: Callable[[], None]) -> None:
        self._undo.append(action)

    def commit(self) -> None:
        self._undo.clear()
        self._finish()

    def rollback(self) -> None:
        for action in reversed(self._undo):
            action()
        self._undo.clear()
        self._finish()

    def _finish(self) -> None:
        for lock in reversed(list(self._held.values())):
            lock.release()
        self._held.clear()
        self._active = False
