import asyncio
import sys

from sqlalchemy import text

from app.utils.db_async import (
    DATABASE_URL,
    SessionLocal,
    describe_database_url,
    dispose_engine,
    ping_database,
)


async def check() -> int:
    print(f"Using database: {describe_database_url(DATABASE_URL)}")
    try:
        await ping_database()
        async with SessionLocal() as session:
            res = await session.execute(text("SELECT COUNT(*) FROM seasons"))
            count = res.scalar()
    except Exception as exc:
        print(f"Database check failed: {exc}")
        return 1
    finally:
        await dispose_engine()

    print(f"Database connection successful. Found {count} seasons.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(check()))
