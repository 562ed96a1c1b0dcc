"""Season data access.

Query and write functions over an injected async session. Reads return typed
read models; writes commit a single statement and let storage errors
propagate to the caller.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.models.seasons import GameRead, PlayerRead, PlayerStatus, SeasonRead
from app.schemas.games import Game
from app.schemas.players import Player
from app.schemas.seasons import Season, SeasonPlayer

logger = logging.getLogger(__name__)


async def list_seasons(db: AsyncSession) -> list[SeasonRead]:
    """All seasons, most recently created first."""
    result = await db.execute(
        select(Season.id, Season.name, Season.created_at).order_by(  # type: ignore[call-overload]
            Season.created_at.desc(),  # type: ignore[attr-defined]
            Season.id.desc(),  # type: ignore[union-attr]
        )
    )
    return [
        SeasonRead(id=row.id, name=row.name, created_at=row.created_at)
        for row in result.all()
    ]


async def get_season_player_statuses(
    db: AsyncSession, season_id: int
) -> list[PlayerStatus]:
    """Every member of the season with their hosting status.

    A player hosting several games in the season is reported once, with the
    earliest hosting date. Rows come back ordered by name; the visited/to-visit
    ordering is applied during page assembly.
    """
    hosted = (
        select(  # type: ignore[call-overload]
            Game.host_id.label("player_id"),  # type: ignore[attr-defined]
            func.min(Game.game_date).label("hosted_on"),
        )
        .where(Game.season_id == season_id)  # type: ignore[arg-type]
        .group_by(Game.host_id)
        .subquery("hosted")
    )
    query = (
        select(  # type: ignore[call-overload]
            Player.id,
            Player.name,
            Player.created_at,
            hosted.c.hosted_on,
        )
        .join(SeasonPlayer, SeasonPlayer.player_id == Player.id)
        .outerjoin(hosted, hosted.c.player_id == Player.id)
        .where(SeasonPlayer.season_id == season_id)  # type: ignore[arg-type]
        .order_by(Player.name, Player.id)
    )
    result = await db.execute(query)
    return [
        PlayerStatus(
            id=row.id,
            name=row.name,
            created_at=row.created_at,
            hosted_on=row.hosted_on,
        )
        for row in result.all()
    ]


async def list_season_games(db: AsyncSession, season_id: int) -> list[GameRead]:
    """Games of a season with player names resolved, oldest first.

    Winner and second place are inner joined, so games whose result has not
    been recorded yet are left out of this listing.
    """
    host = aliased(Player, name="host")
    winner = aliased(Player, name="winner")
    second = aliased(Player, name="second_place")

    query = (
        select(  # type: ignore[call-overload]
            Game.id,
            Game.season_id,
            Game.host_id,
            Game.winner_id,
            Game.second_place_id,
            Game.game_date,
            Game.created_at,
            host.name.label("host_name"),
            winner.name.label("winner_name"),
            second.name.label("second_place_name"),
        )
        .select_from(Game)
        .join(host, host.id == Game.host_id)
        .join(winner, winner.id == Game.winner_id)
        .join(second, second.id == Game.second_place_id)
        .where(Game.season_id == season_id)  # type: ignore[arg-type]
        .order_by(Game.game_date, Game.id)
    )
    result = await db.execute(query)
    return [GameRead(**row) for row in result.mappings().all()]


async def list_all_players(db: AsyncSession) -> list[PlayerRead]:
    """Every player in the system ordered by name, for the add-game form."""
    result = await db.execute(
        select(Player.id, Player.name, Player.created_at).order_by(  # type: ignore[call-overload]
            Player.name, Player.id
        )
    )
    return [
        PlayerRead(id=row.id, name=row.name, created_at=row.created_at)
        for row in result.all()
    ]


async def get_game(db: AsyncSession, game_id: int) -> Game | None:
    """Look up a stored game by id, regardless of whether it has a result."""
    return await db.get(Game, game_id)


async def add_game(
    db: AsyncSession,
    season_id: int,
    host_id: int,
    winner_id: int | None,
    second_place_id: int | None,
    game_date: date,
) -> Game:
    """Insert a game and commit.

    Args:
        db: Async database session
        season_id: Owning season
        host_id: Hosting player
        winner_id: Winning player, None when not recorded yet
        second_place_id: Runner-up, None when not recorded yet
        game_date: Calendar date of the game

    Returns:
        The stored Game with its generated id

    Raises:
        SQLAlchemyError: on any storage failure, e.g. an unknown player or
            season id violating a foreign key. The session is rolled back.
    """
    game = Game(
        season_id=season_id,
        host_id=host_id,
        winner_id=winner_id,
        second_place_id=second_place_id,
        game_date=game_date,
    )
    db.add(game)
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise
    await db.refresh(game)
    logger.info(f"Stored game {game.id} in season {season_id} hosted by {host_id}")
    return game


async def update_game_date(db: AsyncSession, game_id: int, new_date: date) -> int:
    """Move a game to another date.

    An unknown ``game_id`` is not an error: nothing is changed and 0 is
    returned.

    Returns:
        Number of rows updated (0 or 1)
    """
    stmt = (
        update(Game)
        .where(Game.id == game_id)  # type: ignore[arg-type]
        .values(game_date=new_date)
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise
    return result.rowcount or 0
