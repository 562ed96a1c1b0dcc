"""Populate the database with demo seasons, players and games.

Creates four seasons and twenty players, enrolls a random 10-15 players in
each season and records 10-20 games per season within 90 days of the season
start. About one game in five has no result recorded yet.

Usage:
    python -m app.cli.generate_demo_data [--seed 42]

Exit codes:
    0 - Success
    1 - Failure (check logs for details)
"""

import argparse
import asyncio
import logging
import random
import sys
from datetime import date, timedelta

from app.schemas.games import Game
from app.schemas.players import Player
from app.schemas.seasons import Season, SeasonPlayer
from app.utils.db_async import SessionLocal, dispose_engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("generate_demo_data")

SEASON_STARTS: dict[str, date] = {
    "Winter 2024": date(2024, 1, 1),
    "Spring 2025": date(2025, 3, 1),
    "Summer 2025": date(2025, 6, 1),
    "Fall 2025": date(2025, 9, 1),
}

PLAYER_NAMES = [
    "Max Mustermann", "Lisa Schmidt", "Jonas Weber", "Anna Müller", "Felix König",
    "Sophie Becker", "Lukas Hoffmann", "Emma Fischer", "Paul Wagner", "Laura Schneider",
    "Tim Meyer", "Julia Schulz", "Nico Bauer", "Lena Schäfer", "David Klein",
    "Marie Richter", "Fabian Wolf", "Nina Braun", "Philipp Zimmermann", "Katja Schwarz",
]

UNRECORDED_RESULT_CHANCE = 0.2


def plan_games(
    rng: random.Random,
    season_start: date,
    member_ids: list[int],
) -> list[tuple[int, int | None, int | None, date]]:
    """Draw (host, winner, second, date) tuples for one season.

    Host, winner and second place are distinct members; winner and second
    are both None for games without a recorded result.
    """
    planned = []
    for _ in range(rng.randint(10, 20)):
        game_date = season_start + timedelta(days=rng.randrange(90))
        host_id, winner_id, second_id = rng.sample(member_ids, 3)
        if rng.random() < UNRECORDED_RESULT_CHANCE:
            planned.append((host_id, None, None, game_date))
        else:
            planned.append((host_id, winner_id, second_id, game_date))
    return planned


async def generate(rng: random.Random) -> None:
    async with SessionLocal() as db:
        seasons = [Season(name=name) for name in SEASON_STARTS]
        players = [Player(name=name) for name in PLAYER_NAMES]
        db.add_all(seasons + players)
        await db.flush()
        for season in seasons:
            logger.info(f"Created season: {season.name} (ID: {season.id})")
        logger.info(f"Created {len(players)} players")

        player_ids = [p.id for p in players if p.id is not None]
        for season in seasons:
            if season.id is None:
                raise RuntimeError(f"Season {season.name!r} has no id after flush")
            member_ids = rng.sample(player_ids, rng.randint(10, 15))
            db.add_all(
                SeasonPlayer(season_id=season.id, player_id=pid) for pid in member_ids
            )

            games = [
                Game(
                    season_id=season.id,
                    host_id=host_id,
                    winner_id=winner_id,
                    second_place_id=second_id,
                    game_date=game_date,
                )
                for host_id, winner_id, second_id, game_date in plan_games(
                    rng, SEASON_STARTS[season.name], member_ids
                )
            ]
            db.add_all(games)
            logger.info(
                f"Season {season.name}: {len(member_ids)} players, {len(games)} games"
            )

        await db.commit()


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate demo poker data.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    try:
        await generate(random.Random(args.seed))
        logger.info("Successfully generated demo data")
        return 0
    except Exception as e:
        logger.error(f"Demo data generation failed: {e}", exc_info=True)
        return 1
    finally:
        await dispose_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
