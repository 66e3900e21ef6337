import pytest

from resort_booking.application.dtos.event_dto import SignupForEventDTO
from resort_booking.domain.errors import (
    AuthRequiredError,
    EventSlotNotFoundError,
    InsufficientSeatsError,
    ValidationError,
)

USER_ID = 42


def _signup(slot_id=1, party_size=1, first_name="Jan", last_name="Kowalski"):
    return SignupForEventDTO(
        slot_id=slot_id, party_size=party_size, first_name=first_name, last_name=last_name
    )


def _assert_slot_books_balance(memory_db, slot_id):
    slot = memory_db.slots[slot_id]
    taken = sum(s.party_size for s in memory_db.signups.values() if s.slot_id == slot_id)
    assert slot.remaining >= 0
    assert slot.capacity - slot.remaining == taken


class TestSignupForEvent:
    @pytest.mark.asyncio
    async def test_capacity_scenario(self, use_cases, memory_db):
        """capacity 10: 7 fits, 5 does not (3 left), 3 fills the slot."""
        first = await use_cases.signup.execute(USER_ID, 1, _signup(party_size=7))
        assert first.remaining == 3
        assert memory_db.slots[1].remaining == 3

        with pytest.raises(InsufficientSeatsError) as exc_info:
            await use_cases.signup.execute(USER_ID, 1, _signup(party_size=5))
        assert exc_info.value.available == 3
        assert memory_db.slots[1].remaining == 3

        last = await use_cases.signup.execute(USER_ID, 1, _signup(party_size=3))
        assert last.remaining == 0
        assert memory_db.slots[1].remaining == 0

        _assert_slot_books_balance(memory_db, 1)
        assert len(memory_db.signups) == 2

    @pytest.mark.asyncio
    async def test_signup_is_recorded(self, use_cases, memory_db, clock):
        confirmation = await use_cases.signup.execute(USER_ID, "1", _signup(party_size=2))

        signup = memory_db.signups[confirmation.signup_id]
        assert (signup.user_id, signup.event_id, signup.slot_id) == (USER_ID, 1, 1)
        assert signup.party_size == 2
        assert signup.created_at == clock.now()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "event_id, slot_id",
        [
            (1, 999),  # unknown slot
            (3, 1),  # slot of another event
            (2, 3),  # inactive event
            (3, 5),  # inactive slot
        ],
    )
    async def test_missing_or_inactive_slot(self, use_cases, memory_db, event_id, slot_id):
        with pytest.raises(EventSlotNotFoundError):
            await use_cases.signup.execute(USER_ID, event_id, _signup(slot_id=slot_id))
        assert memory_db.signups == {}

    @pytest.mark.asyncio
    async def test_requires_identity(self, use_cases):
        with pytest.raises(AuthRequiredError):
            await use_cases.signup.execute(None, 1, _signup())

    @pytest.mark.asyncio
    async def test_rejects_empty_party(self, use_cases, memory_db):
        with pytest.raises(ValidationError):
            await use_cases.signup.execute(USER_ID, 1, _signup(party_size=0))
        assert memory_db.slots[1].remaining == 10

    @pytest.mark.asyncio
    async def test_failed_insert_restores_seats(self, use_cases, memory_db, monkeypatch):
        repo = use_cases.signup._event_repo

        async def broken_create_signup(signup):
            raise RuntimeError("insert failed")

        monkeypatch.setattr(repo, "create_signup", broken_create_signup)

        with pytest.raises(RuntimeError):
            await use_cases.signup.execute(USER_ID, 1, _signup(party_size=4))

        assert memory_db.slots[1].remaining == 10
        assert memory_db.signups == {}
        assert not memory_db.locks.is_locked(("slot", 1))
