"""Pytest fixtures for the season tracker.

Integration tests run against a throwaway SQLite file per test unless
TEST_DATABASE_URL points at a real database.
"""

import os
from datetime import datetime
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from pydantic import ValidationError
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from dotenv import load_dotenv

load_dotenv()


def _load_database_url(tmp_path) -> str:
    """Resolve the database URL for tests, enforcing an explicit opt-in for real databases."""
    test_db_url = os.getenv("TEST_DATABASE_URL")
    if not test_db_url:
        return f"sqlite+aiosqlite:///{tmp_path / 'pokerhans_test.db'}"
    pytest_allow_db = int(os.getenv("PYTEST_ALLOW_DB", "0"))
    if pytest_allow_db != 1:
        raise RuntimeError(
            "Running integration tests requires setting PYTEST_ALLOW_DB=1 to"
            " confirm the configured database is safe to mutate."
        )
    return test_db_url


@pytest.fixture()
def database_url(tmp_path) -> str:
    """Return the database URL the test should target."""
    return _load_database_url(tmp_path)


@pytest_asyncio.fixture()
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Yield an async engine with a freshly created schema."""
    # Ensure SQLModel metadata is populated before creating tables.
    from app.schemas import games  # noqa: F401
    from app.schemas import players  # noqa: F401
    from app.schemas import seasons  # noqa: F401

    engine = create_async_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session bound to the per-test schema."""
    session_factory = async_sessionmaker(
        async_engine, expire_on_commit=False, class_=AsyncSession
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest_asyncio.fixture()
async def app_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client with the application wired to the test session."""
    try:
        from app.main import app
    except ValidationError as exc:  # pragma: no cover - guard for misconfigured env
        pytest.skip(f"App configuration failed: {exc}")

    from app.utils.db_async import get_session

    async def _get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_session] = _get_session_override
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest_asyncio.fixture()
async def summer_season(db_session: AsyncSession) -> dict[str, Any]:
    """Season "Summer 2025" with Alice, Bob and Charlie as members, no games yet.

    Players are created in that order one day apart, so creation order is
    Alice < Bob < Charlie while name order is the same.
    """
    from app.schemas.players import Player
    from app.schemas.seasons import Season, SeasonPlayer

    season = Season(name="Summer 2025", created_at=datetime(2025, 5, 1, 12, 0))
    players = {
        name: Player(name=name, created_at=datetime(2025, 5, day, 12, 0))
        for day, name in ((1, "Alice"), (2, "Bob"), (3, "Charlie"))
    }
    db_session.add(season)
    db_session.add_all(players.values())
    await db_session.flush()

    for player in players.values():
        db_session.add(SeasonPlayer(season_id=season.id, player_id=player.id))  # type: ignore[arg-type]
    await db_session.commit()

    return {"season": season, "players": players}
