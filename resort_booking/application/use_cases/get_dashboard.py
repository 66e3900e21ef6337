from resort_booking.application.dtos.event_dto import DashboardDTO
from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.interfaces.event_repo import EventRepo
from resort_booking.application.interfaces.reservation_repo import ReservationRepo
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import require_user


class GetDashboardUseCase:
    """
    Short overview for the user panel: the first stays by check-in date and
    the upcoming event signups.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        event_repo: EventRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        limit: int = 5,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._limit = limit

    async def execute(self, user_id: int | None) -> DashboardDTO:
        user = require_user(user_id)
        async with self._transaction_manager.start():
            reservations = await self._reservation_repo.list_by_check_in_for_user(
                user, self._limit
            )
            events = await self._event_repo.list_upcoming_signups(
                user, self._clock.now(), self._limit
            )
        return DashboardDTO(reservations=reservations, events=events)
