"""Season dashboard assembly.

Combines the season queries into the view model rendered by the season page:
which season is current, which players already hosted ("visited") and which
are still to visit, the game history and the player choices for the form.

The four reads are not wrapped in one snapshot; a game written concurrently
may or may not show up in a given render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.seasons import GameRead, PlayerRead, PlayerStatus, SeasonRead
from app.services.season_service import (
    get_season_player_statuses,
    list_all_players,
    list_season_games,
    list_seasons,
)

logger = logging.getLogger(__name__)


@dataclass
class SeasonPage:
    """Everything the season template needs."""

    seasons: list[SeasonRead]
    current_season: SeasonRead
    visited_players: list[PlayerStatus]
    to_visit_players: list[PlayerStatus]
    games: list[GameRead]
    all_players: list[PlayerRead]
    current_date: date
    is_latest_season: bool


def split_players_by_hosting(
    players: Iterable[PlayerStatus],
) -> tuple[list[PlayerStatus], list[PlayerStatus]]:
    """Split season members into (visited, to_visit).

    Visited players are ordered by their hosting date, earliest first; the
    rest by creation time, earliest added first.
    """
    visited: list[PlayerStatus] = []
    to_visit: list[PlayerStatus] = []
    for player in players:
        if player.has_hosted:
            visited.append(player)
        else:
            to_visit.append(player)

    visited.sort(key=lambda p: (p.hosted_on, p.id))
    to_visit.sort(key=lambda p: (p.created_at, p.id))
    return visited, to_visit


def find_latest_season_id(seasons: Iterable[SeasonRead]) -> Optional[int]:
    """The latest season is the one with the highest id, not the newest created_at."""
    ids = [s.id for s in seasons]
    return max(ids) if ids else None


def find_season(seasons: Iterable[SeasonRead], season_id: int) -> Optional[SeasonRead]:
    return next((s for s in seasons if s.id == season_id), None)


async def get_most_recent_season(db: AsyncSession) -> Optional[SeasonRead]:
    """Most recently created season, used as the landing redirect target."""
    seasons = await list_seasons(db)
    return seasons[0] if seasons else None


async def build_season_page(
    db: AsyncSession,
    season_id: int,
    today: Optional[date] = None,
) -> Optional[SeasonPage]:
    """Assemble the dashboard for one season.

    Args:
        db: Async database session
        season_id: Season to render
        today: Default for the add-game date input (defaults to date.today())

    Returns:
        SeasonPage, or None when no season has this id
    """
    seasons = await list_seasons(db)
    logger.info(f"Found {len(seasons)} seasons total")

    current = find_season(seasons, season_id)
    if current is None:
        return None

    statuses = await get_season_player_statuses(db, season_id)
    logger.info(f"Found {len(statuses)} players for season {season_id}")

    games = await list_season_games(db, season_id)
    logger.info(f"Found {len(games)} games for season {season_id}")

    visited, to_visit = split_players_by_hosting(statuses)
    logger.info(f"{len(visited)} players visited, {len(to_visit)} players to visit")

    all_players = await list_all_players(db)
    logger.info(f"Found {len(all_players)} total players in system")

    return SeasonPage(
        seasons=seasons,
        current_season=current,
        visited_players=visited,
        to_visit_players=to_visit,
        games=games,
        all_players=all_players,
        current_date=today or date.today(),
        is_latest_season=season_id == find_latest_season_id(seasons),
    )
