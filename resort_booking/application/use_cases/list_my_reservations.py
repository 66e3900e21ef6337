from resort_booking.application.interfaces.reservation_repo import (
    ReservationRepo,
    ReservationSummary,
)
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import require_user


class ListMyReservationsUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        limit: int = 50,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._limit = limit

    async def execute(self, user_id: int | None) -> list[ReservationSummary]:
        user = require_user(user_id)
        async with self._transaction_manager.start():
            return await self._reservation_repo.list_recent_for_user(user, self._limit)
