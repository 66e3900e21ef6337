from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resort_booking.config import Settings

# Execution option set by the transaction manager on write units of work
SQLITE_WRITE_LOCK_OPTION = "resort_booking_write_lock"


def build_engine(settings: Settings) -> AsyncEngine:
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is required for SQL mode")
    if settings.database_url.startswith("sqlite"):
        engine = create_async_engine(
            settings.database_url,
            echo=settings.sql_echo,
            connect_args={"timeout": settings.lock_timeout_seconds},
        )
        enable_sqlite_write_locks(engine)
        return engine
    engine = create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    if engine.dialect.name == "mysql" and settings.lock_timeout_seconds:
        enable_mysql_lock_wait_timeout(engine, settings.lock_timeout_seconds)
    return engine


def enable_sqlite_write_locks(engine: AsyncEngine) -> None:
    """
    Start SQLite write units of work with ``BEGIN IMMEDIATE``.

    SQLite has no row locks and ignores ``FOR UPDATE``; taking the database
    write lock up front is what keeps two booking transactions from reading
    the same free room. Only connections carrying
    ``SQLITE_WRITE_LOCK_OPTION`` get it; searches and readers use a deferred
    ``BEGIN`` and keep reading while a booking is in flight. A waiter gives
    up after the ``timeout`` connect argument with "database is locked".
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        if conn.get_execution_options().get(SQLITE_WRITE_LOCK_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


def set_mysql_lock_wait_timeout(dbapi_connection, lock_timeout_seconds: float) -> None:
    # innodb only accepts whole seconds
    seconds = max(1, round(lock_timeout_seconds))
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute(f"SET SESSION innodb_lock_wait_timeout = {seconds}")
    finally:
        cursor.close()


def enable_mysql_lock_wait_timeout(engine: AsyncEngine, lock_timeout_seconds: float) -> None:
    """
    Apply the row lock wait timeout once per pooled MySQL connection.

    MySQL has no transaction-scoped form of ``innodb_lock_wait_timeout``, so
    every connection in the pool carries the same value for its lifetime.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _lock_wait_timeout(dbapi_connection, connection_record):
        set_mysql_lock_wait_timeout(dbapi_connection, lock_timeout_seconds)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
