"""
Competing requests against one resource.

Every contender gets its own session, as separate HTTP requests would, and
all of them are started together with ``asyncio.gather``.
"""

import asyncio
import itertools

import pytest

from conftest import NOW, in_memory_use_cases, seed_catalog
from resort_booking.application.dtos.event_dto import SignupForEventDTO
from resort_booking.application.dtos.room_dto import BookRoomDTO
from resort_booking.domain.errors import CapacityConflictError, InfrastructureError
from resort_booking.infrastructure.in_memory.database import InMemoryDatabase, InMemorySession
from resort_booking.infrastructure.in_memory.room_repo import InMemoryRoomRepo
from resort_booking.infrastructure.in_memory.transaction_manager import (
    InMemoryTransactionManager,
)

pytestmark = pytest.mark.concurrency


def _booking(room_type, date_from, date_to):
    return BookRoomDTO(
        room_type=room_type,
        date_from=date_from,
        date_to=date_to,
        adults=1,
        first_name="Race",
        last_name="Contender",
    )


def _outcomes(results):
    successes = [r for r in results if not isinstance(r, BaseException)]
    conflicts = [r for r in results if isinstance(r, CapacityConflictError)]
    unexpected = [
        r for r in results if isinstance(r, BaseException) and not isinstance(r, CapacityConflictError)
    ]
    assert unexpected == []
    return successes, conflicts


def _assert_no_overlaps(memory_db):
    by_room = {}
    for reservation in memory_db.reservations.values():
        by_room.setdefault(reservation.room_id, []).append(reservation)
    for reservations in by_room.values():
        for a, b in itertools.combinations(reservations, 2):
            assert not (a.blocks_room and b.blocks_room and a.stay.overlaps_with(b.stay))


@pytest.mark.asyncio
async def test_two_bookings_for_the_last_room(memory_db, clock):
    contenders = [in_memory_use_cases(memory_db, clock) for _ in range(2)]

    results = await asyncio.gather(
        *(
            c.book.execute(user_id, _booking("Single", "2030-06-10", "2030-06-13"))
            for user_id, c in enumerate(contenders, start=1)
        ),
        return_exceptions=True,
    )

    successes, conflicts = _outcomes(results)
    assert len(successes) == 1
    assert len(conflicts) == 1
    assert len(memory_db.reservations) == 1
    _assert_no_overlaps(memory_db)


@pytest.mark.asyncio
@pytest.mark.slow
async def test_many_overlapping_bookings_fill_each_room_once(memory_db, clock):
    ranges = [
        ("2030-06-10", "2030-06-13"),
        ("2030-06-11", "2030-06-12"),
        ("2030-06-12", "2030-06-15"),
        ("2030-06-09", "2030-06-11"),
    ] * 5

    results = await asyncio.gather(
        *(
            in_memory_use_cases(memory_db, clock).book.execute(
                user_id, _booking("Standard", date_from, date_to)
            )
            for user_id, (date_from, date_to) in enumerate(ranges, start=1)
        ),
        return_exceptions=True,
    )

    successes, conflicts = _outcomes(results)
    assert len(successes) + len(conflicts) == len(ranges)
    assert successes
    _assert_no_overlaps(memory_db)


@pytest.mark.asyncio
@pytest.mark.parametrize("contenders", [2, 5, 20])
async def test_n_signups_for_the_whole_slot(memory_db, clock, contenders):
    capacity = memory_db.slots[4].remaining

    results = await asyncio.gather(
        *(
            in_memory_use_cases(memory_db, clock).signup.execute(
                user_id, 3, SignupForEventDTO(4, capacity, "Race", "Contender")
            )
            for user_id in range(1, contenders + 1)
        ),
        return_exceptions=True,
    )

    successes, conflicts = _outcomes(results)
    assert len(successes) == 1
    assert len(conflicts) == contenders - 1
    assert all(c.available == 0 for c in conflicts)
    assert memory_db.slots[4].remaining == 0
    assert len(memory_db.signups) == 1


@pytest.mark.asyncio
async def test_mixed_party_sizes_never_oversell(memory_db, clock):
    sizes = [3, 1, 4, 2, 2, 5, 1, 1, 3, 2]

    results = await asyncio.gather(
        *(
            in_memory_use_cases(memory_db, clock).signup.execute(
                user_id, 1, SignupForEventDTO(1, size, "Race", "Contender")
            )
            for user_id, size in enumerate(sizes, start=1)
        ),
        return_exceptions=True,
    )

    _outcomes(results)
    slot = memory_db.slots[1]
    taken = sum(s.party_size for s in memory_db.signups.values() if s.slot_id == 1)
    assert slot.remaining >= 0
    assert slot.capacity - slot.remaining == taken


@pytest.mark.asyncio
async def test_lock_wait_times_out_without_side_effects(clock):
    memory_db = InMemoryDatabase(lock_timeout_seconds=0.05)
    seed_catalog(memory_db, NOW)

    holder = InMemorySession(memory_db)
    async with InMemoryTransactionManager(holder).start(serializable=True):
        await InMemoryRoomRepo(holder).lock_candidate_rooms("Single", 1)

        with pytest.raises(InfrastructureError) as exc_info:
            await in_memory_use_cases(memory_db, clock).book.execute(
                1, _booking("Single", "2030-06-10", "2030-06-11")
            )

    assert exc_info.value.transient is True
    assert memory_db.reservations == {}
    assert not memory_db.locks.is_locked(("room", 6))
