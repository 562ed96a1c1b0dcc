"""Game write routes: record a new game and correct a game's date."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from app.services.game_form_service import (
    GameDateFormData,
    GameFormData,
    parse_game_date_form,
    parse_game_form,
)
from app.services.season_service import add_game, update_game_date
from app.utils.db_async import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/game", tags=["games"])


@router.post("/add")
async def add_game_route(
    season_id: str = Form(default=""),
    host_id: str = Form(default=""),
    winner_id: str | None = Form(default=None),
    second_place_id: str | None = Form(default=None),
    game_date: str = Form(default=""),
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Record a game and go back to its season."""
    form_data = GameFormData(
        season_id=season_id,
        host_id=host_id,
        game_date=game_date,
        winner_id=winner_id,
        second_place_id=second_place_id,
    )
    parsed = parse_game_form(form_data)
    if isinstance(parsed, str):
        logger.warning(f"Rejected add-game form: {parsed} ({form_data})")
        raise HTTPException(status_code=400, detail=parsed)

    logger.info(
        f"Adding game: season={parsed.season_id} host={parsed.host_id} "
        f"winner={parsed.winner_id} second={parsed.second_place_id} "
        f"date={parsed.game_date.isoformat()}"
    )
    await add_game(
        db,
        season_id=parsed.season_id,
        host_id=parsed.host_id,
        winner_id=parsed.winner_id,
        second_place_id=parsed.second_place_id,
        game_date=parsed.game_date,
    )
    return RedirectResponse(url=f"/season/{parsed.season_id}", status_code=303)


@router.post("/update-date")
async def update_game_date_route(
    game_id: str = Form(default=""),
    season_id: str = Form(default=""),
    new_date: str = Form(default=""),
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Correct the date of a game. Unknown game ids are ignored."""
    form_data = GameDateFormData(game_id=game_id, season_id=season_id, new_date=new_date)
    parsed = parse_game_date_form(form_data)
    if isinstance(parsed, str):
        logger.warning(f"Rejected update-date form: {parsed} ({form_data})")
        raise HTTPException(status_code=400, detail=parsed)

    updated = await update_game_date(db, parsed.game_id, parsed.new_date)
    if updated == 0:
        logger.warning(f"No game with id {parsed.game_id}; date left unchanged")
    else:
        logger.info(f"Moved game {parsed.game_id} to {parsed.new_date.isoformat()}")

    return RedirectResponse(url=f"/season/{parsed.season_id}", status_code=303)
