from resort_booking.application.interfaces.clock import Clock
from resort_booking.application.interfaces.event_repo import EventRepo, UpcomingSignup
from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.application.validation import require_user


class ListMyEventSignupsUseCase:
    """The user's signups for slots that have not started yet, soonest first."""

    def __init__(
        self,
        event_repo: EventRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        limit: int = 5,
    ) -> None:
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._limit = limit

    async def execute(self, user_id: int | None) -> list[UpcomingSignup]:
        user = require_user(user_id)
        async with self._transaction_manager.start():
            return await self._event_repo.list_upcoming_signups(
                user, self._clock.now(), self._limit
            )
