from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """
    Opens one unit of work over the request's datastore handle.

    Leaving the block normally commits; any exception rolls back everything
    done inside it before propagating. ``serializable=True`` is used by the
    write paths that rely on row locks to keep the overlap and capacity
    invariants.
    """

    @asynccontextmanager
    async def start(self, serializable: bool = False) -> AsyncIterator[None]:
        yield
