from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.infrastructure.in_memory.database import InMemorySession


class InMemoryTransactionManager(TransactionManager):
    """
    Unit of work over an ``InMemorySession``.

    Isolation comes from the row locks the repositories take, so
    ``serializable`` needs no extra work here.
    """

    def __init__(self, session: InMemorySession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self, serializable: bool = False) -> AsyncIterator[None]:
        if self._session.in_transaction():
            yield
            return
        self._session.begin()
        try:
            yield
        except BaseException:
            self._session.rollback()
            raise
        self._session.commit()
