"""
Retry utilities for transient datastore failures.

The booking engine never retries on its own: a unit of work that fails with
a deadlock, a lock wait timeout or a serialization failure is rolled back
and surfaced as ``InfrastructureError(transient=True)``. The HTTP layer uses
the helpers below to re-run the whole unit of work, which is safe because
nothing was applied.
"""

import asyncio
import logging
from functools import wraps
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from resort_booking.domain.errors import InfrastructureError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# MySQL error codes
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"

# PostgreSQL SQLSTATEs
PG_SERIALIZATION_FAILURE = "40001"
PG_DEADLOCK_DETECTED = "40P01"
PG_LOCK_NOT_AVAILABLE = "55P03"

SQLITE_BUSY = "database is locked"

_TRANSIENT_MARKERS = (
    MYSQL_DEADLOCK_ERROR,
    MYSQL_LOCK_WAIT_TIMEOUT,
    PG_SERIALIZATION_FAILURE,
    PG_DEADLOCK_DETECTED,
    PG_LOCK_NOT_AVAILABLE,
    SQLITE_BUSY,
)


def is_transient_error(error: Exception) -> bool:
    """
    Check if an exception is a transient failure worth retrying.

    Args:
        error: The exception to check

    Returns:
        True for deadlocks, lock wait timeouts, serialization failures and
        SQLite busy errors, or for an InfrastructureError already marked
        transient
    """
    if isinstance(error, InfrastructureError):
        return error.transient
    if isinstance(error, (OperationalError, DBAPIError)):
        orig = getattr(error, "orig", None)
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        if sqlstate in (PG_SERIALIZATION_FAILURE, PG_DEADLOCK_DETECTED, PG_LOCK_NOT_AVAILABLE):
            return True
        error_str = str(error)
        return any(marker in error_str for marker in _TRANSIENT_MARKERS)
    return False


async def retry_on_transient_error(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Retry a unit of work if it fails with a transient datastore error.

    Uses exponential backoff: base_delay * (2 ** attempt)

    Args:
        func: The async function to execute
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.1)

    Returns:
        The result of the function call

    Raises:
        The original exception if max attempts exceeded or the error is not
        transient

    Example:
        result = await retry_on_transient_error(
            lambda: use_case.execute(user_id, request)
        )
    """
    max_attempts = max(1, max_attempts)

    for attempt in range(max_attempts):
        try:
            return await func()
        except Exception as e:
            if not is_transient_error(e):
                raise

            if attempt >= max_attempts - 1:
                logger.error(
                    "Transient database error persists after max retries",
                    extra={
                        "attempts": max_attempts,
                        "error": str(e),
                    }
                )
                raise

            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Transient database error, retrying",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": str(e),
                }
            )
            await asyncio.sleep(delay)

    raise RuntimeError("Unexpected state in retry_on_transient_error")


def with_transient_retry(max_attempts: int = 3, base_delay: float = 0.1):
    """
    Decorator to automatically retry async functions on transient errors.

    Example:
        @with_transient_retry(max_attempts=3)
        async def book(use_case, user_id, request):
            return await use_case.execute(user_id, request)
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            async def execute():
                return await func(*args, **kwargs)

            return await retry_on_transient_error(execute, max_attempts, base_delay)

        return wrapper
    return decorator
