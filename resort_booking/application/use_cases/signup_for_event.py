import logging
from typing import Any

from resort_booking.application.dtos.event_dto import SignupConfirmationDTO, SignupForEventDTO
from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.interfaces.event_repo import EventRepo
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import (
    require_user,
    validate_identifier,
    validate_party,
)
from resort_booking.domain.entities.event import EventSignup
from resort_booking.domain.errors import EventSlotNotFoundError, InsufficientSeatsError

logger = logging.getLogger(__name__)


class SignupForEventUseCase:
    """Admit a party to a slot, decrementing its remaining seats, or reject it."""

    def __init__(
        self,
        event_repo: EventRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager
        self._clock = clock

    async def execute(
        self, user_id: int | None, event_id: Any, request: SignupForEventDTO
    ) -> SignupConfirmationDTO:
        user = require_user(user_id)
        event = validate_identifier(event_id, "event_id")
        slot_id = validate_identifier(request.slot_id, "slot_id")
        party = validate_party(request.first_name, request.last_name, request.party_size)

        async with self._transaction_manager.start(serializable=True):
            slot = await self._event_repo.lock_slot(event, slot_id)
            if slot is None:
                raise EventSlotNotFoundError(event, slot_id)

            if not slot.has_room_for(party.party_size):
                logger.warning(
                    "Slot capacity exceeded",
                    extra={
                        "slot_id": slot.id,
                        "requested": party.party_size,
                        "remaining": slot.remaining,
                    },
                )
                raise InsufficientSeatsError(slot.id, party.party_size, slot.remaining)

            if not await self._event_repo.take_seats(slot.id, party.party_size):
                raise InsufficientSeatsError(slot.id, party.party_size, slot.remaining)

            signup_id = await self._event_repo.create_signup(
                EventSignup(
                    user_id=user,
                    event_id=event,
                    slot_id=slot.id,
                    first_name=party.first_name,
                    last_name=party.last_name,
                    party_size=party.party_size,
                    created_at=self._clock.now(),
                )
            )

        remaining = slot.remaining - party.party_size
        logger.info(
            "Event signup committed",
            extra={
                "signup_id": signup_id,
                "slot_id": slot.id,
                "user_id": user,
                "party_size": party.party_size,
                "remaining": remaining,
            },
        )
        return SignupConfirmationDTO(
            signup_id=signup_id,
            event_id=event,
            slot_id=slot.id,
            party_size=party.party_size,
            remaining=remaining,
        )
