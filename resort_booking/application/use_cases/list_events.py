from resort_booking.application.interfaces.event_repo import EventRepo, EventWithSlots
from resort_booking.application.interfaces.transaction_manager import TransactionManager


class ListEventsUseCase:
    def __init__(self, event_repo: EventRepo, transaction_manager: TransactionManager) -> None:
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager

    async def execute(self) -> list[EventWithSlots]:
        async with self._transaction_manager.start():
            return await self._event_repo.list_active_with_slots()
