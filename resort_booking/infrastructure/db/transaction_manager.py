import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession

from resort_booking.application.interfaces.transaction_manager import TransactionManager
from resort_booking.domain.errors import InfrastructureError
from resort_booking.infrastructure.db.engine import SQLITE_WRITE_LOCK_OPTION
from resort_booking.infrastructure.db.retry import is_transient_error

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionManager(TransactionManager):
    """
    Unit of work over one ``AsyncSession``.

    ``serializable=True`` switches the connection to ``isolation_level`` for
    the duration of the transaction and, where the backend supports it, caps
    how long a row lock may be waited for.
    """

    def __init__(
        self,
        session: AsyncSession,
        isolation_level: str | None = "SERIALIZABLE",
        lock_timeout_seconds: float | None = None,
    ) -> None:
        self._session = session
        self._isolation_level = isolation_level or None
        self._lock_timeout_seconds = lock_timeout_seconds

    @asynccontextmanager
    async def start(self, serializable: bool = False) -> AsyncIterator[None]:
        if self._session.in_transaction():
            yield
            return
        try:
            async with self._session.begin():
                if serializable:
                    await self._prepare_connection()
                yield
        except SQLAlchemyError as e:
            transient = is_transient_error(e)
            logger.warning(
                "Unit of work rolled back on database error",
                extra={"transient": transient, "error": str(e)},
            )
            raise InfrastructureError(
                "The database aborted the operation", transient=transient
            ) from e

    async def _prepare_connection(self) -> AsyncConnection:
        dialect = self._session.bind.dialect.name
        if dialect == "sqlite":
            # writers are serialized by BEGIN IMMEDIATE instead of an isolation level
            options = {SQLITE_WRITE_LOCK_OPTION: True}
        elif self._isolation_level:
            options = {"isolation_level": self._isolation_level}
        else:
            options = None
        connection = await self._session.connection(execution_options=options)

        # MySQL gets its lock wait timeout per pooled connection, see engine.py
        if self._lock_timeout_seconds and dialect == "postgresql":
            millis = int(self._lock_timeout_seconds * 1000)
            await connection.execute(text(f"SET LOCAL lock_timeout = {millis}"))
        return connection
