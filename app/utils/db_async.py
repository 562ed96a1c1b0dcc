"""Async SQLAlchemy engine and session helpers."""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from app.config import Settings, settings


def _normalize_db_url(url: str) -> str:
    """Ensure an async-capable PostgreSQL driver is selected when using Postgres.

    If the URL is plain "postgresql://..." or the alias "postgres://...",
    switch to the asyncpg driver via "postgresql+asyncpg://...".
    """
    try:
        u = make_url(url)
        driver = (u.drivername or "").lower()
        # An explicit driver (e.g. sqlite+aiosqlite) is respected as-is.
        if "+" in driver:
            return u.render_as_string(hide_password=False)
        if driver in ("postgres", "postgresql"):
            u = u.set(drivername="postgresql+asyncpg")
        return u.render_as_string(hide_password=False)
    except Exception:
        # Fallback string-level normalization for odd/partial URLs
        if url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        if url.startswith("postgres://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        return url


def resolve_database_url(config: Settings) -> str:
    """The configured database URL with an async driver selected."""
    return _normalize_db_url(config.database_url_resolved)


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    """Open the pooled async engine described by ``config``.

    The engine's pool is shared by all requests; each request checks out its
    own session via :func:`get_session`.
    """
    return create_async_engine(
        resolve_database_url(config),
        pool_pre_ping=True,
    )


engine = create_engine_from_settings(settings)
DATABASE_URL = engine.url.render_as_string(hide_password=False)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session."""
    async with SessionLocal() as session:
        yield session

async def init_db(bind: AsyncEngine | None = None):
    """Initialize the database (create tables)."""
    # Ensure models are imported so metadata is fully populated
    # Import locally to avoid circular imports at module import time
    from app.schemas import games, players, seasons  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

async def ping_database(bind: AsyncEngine | None = None) -> None:
    """Round-trip a trivial query; raises if the database is unreachable."""
    async with (bind or engine).connect() as conn:
        await conn.execute(text("SELECT 1"))

async def dispose_engine() -> None:
    """Dispose of the async engine and its connection pool."""
    await engine.dispose()

def describe_database_url(url: str) -> str:
    """Return a sanitized, human-readable description of the DB URL for logging.

    Example: "postgresql+asyncpg://user@host:5432/dbname"
    Passwords are never included.
    """
    try:
        u = make_url(url)
        auth = u.username or "?"
        host = u.host or "?"
        port = f":{u.port}" if u.port else ""
        db = u.database or "?"
        return f"{u.drivername}://{auth}@{host}{port}/{db}"
    except Exception:
        # On parse failure, do not log the raw URL; hint only
        return "<unparseable database URL>"
