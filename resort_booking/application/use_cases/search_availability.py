from resort_booking.application.dtos.room_dto import SearchAvailabilityDTO
from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.interfaces.room_repo import RoomRepo, RoomTypeAvailability
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import validate_guests, validate_stay


class SearchAvailabilityUseCase:
    """
    Per room type, how many rooms are free for a stay.

    Advisory only: it takes no lock, and the booking path re-checks overlaps
    under its own locks.
    """

    def __init__(
        self,
        room_repo: RoomRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._room_repo = room_repo
        self._transaction_manager = transaction_manager
        self._clock = clock

    async def execute(self, request: SearchAvailabilityDTO) -> list[RoomTypeAvailability]:
        stay = validate_stay(request.date_from, request.date_to, self._clock.today())
        guests = validate_guests(request.guests)

        async with self._transaction_manager.start():
            return await self._room_repo.search_availability(stay, guests)
