from functools import lru_cache
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from resort_booking.config import get_settings
from resort_booking.infrastructure.db.engine import build_engine, build_sessionmaker

# Local fallback when no DATABASE_URL is configured for SQL mode
DEFAULT_DB_URL = "sqlite+aiosqlite:///./resort_booking.db"


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    settings = get_settings()
    if not settings.database_url:
        settings = settings.model_copy(update={"database_url": DEFAULT_DB_URL})
    return build_engine(settings)


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(get_engine())

