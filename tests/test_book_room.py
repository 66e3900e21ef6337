from datetime import date
from decimal import Decimal

import pytest

from conftest import in_memory_use_cases
from resort_booking.application.dtos.room_dto import BookRoomDTO, SearchAvailabilityDTO
from resort_booking.domain.entities.reservation import ReservationStatus
from resort_booking.domain.errors import (
    AuthRequiredError,
    CapacityConflictError,
    InvalidDateRangeError,
    NoRoomAvailableError,
    RoomTypeNotFoundError,
    ValidationError,
)

USER_ID = 42


def _booking(room_type="Standard", date_from="2030-06-10", date_to="2030-06-12", **overrides):
    values = {
        "room_type": room_type,
        "date_from": date_from,
        "date_to": date_to,
        "adults": 2,
        "children": 0,
        "first_name": "Anna",
        "last_name": "Nowak",
        "phone": "+48 600 100 200",
        "notes": "",
    }
    values.update(overrides)
    return BookRoomDTO(**values)


class TestBookRoom:
    @pytest.mark.asyncio
    async def test_books_cheapest_free_room(self, use_cases, memory_db):
        confirmation = await use_cases.book.execute(USER_ID, _booking())

        # room 103 is the cheapest Standard that fits two guests
        assert confirmation.room_id == 3
        assert confirmation.room_number == "103"
        assert confirmation.nights == 2
        assert confirmation.total == Decimal("360.00")
        assert confirmation.status == "CONFIRMED"

        stored = memory_db.reservations[confirmation.reservation_id]
        assert stored.status == ReservationStatus.CONFIRMED
        assert stored.user_id == USER_ID
        assert stored.guest.first_name == "Anna"

    @pytest.mark.asyncio
    async def test_ties_on_price_go_to_lowest_id(self, use_cases):
        first = await use_cases.book.execute(USER_ID, _booking())
        second = await use_cases.book.execute(USER_ID, _booking())
        third = await use_cases.book.execute(USER_ID, _booking())

        assert [first.room_id, second.room_id, third.room_id] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_occupancy_filters_candidates(self, use_cases):
        confirmation = await use_cases.book.execute(
            USER_ID, _booking(adults=2, children=1)
        )
        assert confirmation.room_id == 3

        with pytest.raises(NoRoomAvailableError):
            await use_cases.book.execute(USER_ID, _booking(adults=2, children=1))

    @pytest.mark.asyncio
    async def test_inactive_rooms_are_never_booked(self, use_cases):
        rooms = [
            (await use_cases.book.execute(USER_ID, _booking())).room_id for _ in range(3)
        ]
        assert 5 not in rooms
        with pytest.raises(NoRoomAvailableError):
            await use_cases.book.execute(USER_ID, _booking())

    @pytest.mark.asyncio
    async def test_touching_stays_share_a_room(self, use_cases):
        first = await use_cases.book.execute(
            USER_ID, _booking("Single", "2030-06-10", "2030-06-12")
        )
        second = await use_cases.book.execute(
            USER_ID, _booking("Single", "2030-06-12", "2030-06-14")
        )
        earlier = await use_cases.book.execute(
            USER_ID, _booking("Single", "2030-06-08", "2030-06-10")
        )

        assert first.room_id == second.room_id == earlier.room_id == 6

    @pytest.mark.asyncio
    async def test_conflict_leaves_nothing_behind(self, use_cases, memory_db):
        await use_cases.book.execute(USER_ID, _booking("Single"))
        before = dict(memory_db.reservations)

        with pytest.raises(CapacityConflictError) as exc_info:
            await use_cases.book.execute(
                USER_ID, _booking("Single", "2030-06-11", "2030-06-13")
            )

        assert exc_info.value.available == 0
        assert memory_db.reservations == before
        assert not memory_db.locks.is_locked(("room", 6))

    @pytest.mark.asyncio
    async def test_unknown_room_type(self, use_cases):
        with pytest.raises(RoomTypeNotFoundError):
            await use_cases.book.execute(USER_ID, _booking("Penthouse"))

    @pytest.mark.asyncio
    async def test_requires_identity(self, use_cases, memory_db):
        with pytest.raises(AuthRequiredError):
            await use_cases.book.execute(None, _booking())
        assert memory_db.reservations == {}

    @pytest.mark.asyncio
    async def test_rejects_past_check_in(self, use_cases):
        with pytest.raises(InvalidDateRangeError):
            await use_cases.book.execute(USER_ID, _booking(date_from="2030-06-04"))

    @pytest.mark.asyncio
    async def test_rejects_short_names(self, use_cases):
        with pytest.raises(ValidationError) as exc_info:
            await use_cases.book.execute(USER_ID, _booking(last_name="N"))
        assert exc_info.value.field == "last_name"

    @pytest.mark.asyncio
    async def test_total_uses_the_allocated_room_price(self, use_cases):
        confirmation = await use_cases.book.execute(
            USER_ID, _booking("Deluxe", "2030-06-10", "2030-06-17")
        )
        assert confirmation.nights == 7
        assert confirmation.total == Decimal("2450.00")


@pytest.mark.asyncio
async def test_single_room_scenario(memory_db, clock):
    """One free room: search, book, search again, book again."""
    tomorrow = date(2030, 6, 6)
    date_from, date_to = tomorrow.isoformat(), date(2030, 6, 8).isoformat()

    first_request = in_memory_use_cases(memory_db, clock)
    rows = await first_request.search.execute(
        SearchAvailabilityDTO(date_from=date_from, date_to=date_to, guests=1)
    )
    single = next(row for row in rows if row.room_type == "Single")
    assert single.min_price == Decimal("100.00")
    assert (single.available_rooms, single.total_rooms) == (1, 1)

    confirmation = await first_request.book.execute(
        USER_ID, _booking("Single", date_from, date_to)
    )
    assert confirmation.nights == 2
    assert confirmation.total == Decimal("200.00")

    second_request = in_memory_use_cases(memory_db, clock)
    rows = await second_request.search.execute(
        SearchAvailabilityDTO(date_from=date_from, date_to=date_to, guests=1)
    )
    single = next(row for row in rows if row.room_type == "Single")
    assert single.available_rooms == 0

    with pytest.raises(CapacityConflictError):
        await second_request.book.execute(USER_ID, _booking("Single", date_from, date_to))
