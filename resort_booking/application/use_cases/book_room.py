import logging

from resort_booking.application.dtos.room_dto import BookingConfirmationDTO, BookRoomDTO
from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.interfaces.reservation_repo import ReservationRepo
from resort_booking.application.interfaces.room_repo import RoomRepo
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import (
    clean_guest_details,
    require_user,
    validate_occupancy,
    validate_stay,
)
from resort_booking.domain.entities.reservation import Reservation, ReservationStatus
from resort_booking.domain.errors import (
    NoRoomAvailableError,
    RoomTypeNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class BookRoomUseCase:
    """
    Commit exactly one reservation for exactly one room, or nothing.

    The candidate rooms are locked first and the overlap check runs after the
    locks are held. Where the locked read sees the latest committed rows
    (SQLite under ``BEGIN IMMEDIATE``, MySQL, the in-memory store) the second
    of two requests racing for the last free room finds the first one's
    reservation and gets a capacity conflict. PostgreSQL reads from a snapshot
    taken before the lock wait; there the race ends in a serialization
    failure under SERIALIZABLE, surfaced as a transient InfrastructureError
    for the caller to retry.
    """

    def __init__(
        self,
        room_repo: RoomRepo,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._room_repo = room_repo
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._clock = clock

    async def execute(self, user_id: int | None, request: BookRoomDTO) -> BookingConfirmationDTO:
        user = require_user(user_id)
        room_type = (request.room_type or "").strip()
        if not room_type:
            raise ValidationError("room_type", "is required")
        stay = validate_stay(request.date_from, request.date_to, self._clock.today())
        occupancy = validate_occupancy(request.adults, request.children)
        guest = clean_guest_details(
            request.first_name, request.last_name, request.phone, request.notes
        )

        async with self._transaction_manager.start():
            type_exists = await self._room_repo.room_type_exists(room_type)
        if not type_exists:
            raise RoomTypeNotFoundError(room_type)

        async with self._transaction_manager.start(serializable=True):
            candidates = await self._room_repo.lock_candidate_rooms(room_type, occupancy.total)
            taken: set[int] = set()
            if candidates:
                taken = await self._reservation_repo.find_conflicting_room_ids(
                    [room.id for room in candidates], stay
                )
            room = next(
                (r for r in sorted(candidates, key=lambda r: r.sort_key) if r.id not in taken),
                None,
            )
            if room is None:
                logger.warning(
                    "No room available for stay",
                    extra={
                        "room_type": room_type,
                        "check_in": stay.check_in.isoformat(),
                        "check_out": stay.check_out.isoformat(),
                        "guests": occupancy.total,
                        "candidates": len(candidates),
                    },
                )
                raise NoRoomAvailableError(
                    room_type, stay.check_in.isoformat(), stay.check_out.isoformat()
                )

            total = room.price_per_night.times(stay.nights)
            reservation = Reservation(
                user_id=user,
                room_id=room.id,
                stay=stay,
                occupancy=occupancy,
                total_price=total,
                guest=guest,
                status=ReservationStatus.CONFIRMED,
                created_at=self._clock.now(),
            )
            reservation_id = await self._reservation_repo.create(reservation)

        logger.info(
            "Room reserved",
            extra={
                "reservation_id": reservation_id,
                "room_id": room.id,
                "user_id": user,
                "nights": stay.nights,
                "total": str(total),
            },
        )
        return BookingConfirmationDTO(
            reservation_id=reservation_id,
            room_id=room.id,
            room_number=room.number,
            room_type=room.room_type,
            check_in=stay.check_in,
            check_out=stay.check_out,
            nights=stay.nights,
            total=total.amount,
            status=reservation.status.value,
        )
