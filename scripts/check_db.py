import asyncio

from sqlalchemy import func, select

from resort_booking.api.deps import get_engine
from resort_booking.infrastructure.db.tables import metadata


async def check():
    engine = get_engine()
    async with engine.connect() as conn:
        for table in metadata.sorted_tables:
            try:
                res = await conn.execute(select(func.count()).select_from(table))
                print(f"{table.name}: {res.scalar()} rows")
            except Exception as e:
                print(f"{table.name}: Error {e}")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(check())
