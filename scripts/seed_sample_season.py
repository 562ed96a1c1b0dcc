#!/usr/bin/env python
"""Seed a small sample season.

Usage:
    python scripts/seed_sample_season.py

Adds the season "Summer 2025" with Alice, Bob, Charlie, David and Eva as
members, unless a season with that name already exists.
"""

import asyncio
import sys

from dotenv import load_dotenv
from sqlalchemy import select

load_dotenv()


SEASON_NAME = "Summer 2025"
PLAYER_NAMES = ["Alice", "Bob", "Charlie", "David", "Eva"]


async def seed_season() -> None:
    """Seed the sample season and its players into the database."""
    from app.schemas.players import Player
    from app.schemas.seasons import Season, SeasonPlayer
    from app.utils.db_async import SessionLocal, dispose_engine

    try:
        async with SessionLocal() as session:
            existing = await session.execute(
                select(Season).where(Season.name == SEASON_NAME)  # type: ignore[arg-type]
            )
            if existing.scalar_one_or_none() is not None:
                print(f"  SKIP: {SEASON_NAME} (already exists)")
                return

            season = Season(name=SEASON_NAME)
            players = [Player(name=name) for name in PLAYER_NAMES]
            session.add(season)
            session.add_all(players)
            await session.flush()

            for player in players:
                session.add(SeasonPlayer(season_id=season.id, player_id=player.id))  # type: ignore[arg-type]
                print(f"  ADD: {player.name}")

            await session.commit()
            print(f"\nSuccessfully added season '{SEASON_NAME}' with {len(players)} players")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    print("Seeding sample season...")
    try:
        asyncio.run(seed_season())
    except Exception as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
