"""UI Routes - Renders Jinja templates for the frontend."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from app.services.game_form_service import MAX_ROW_ID
from app.services.season_page_service import build_season_page, get_most_recent_season
from app.utils.db_async import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Redirect to the most recent season, or render the empty landing page."""
    season = await get_most_recent_season(db)
    if season is not None:
        redirect_url = f"/season/{season.id}"
        logger.info(f"Redirecting to {redirect_url}")
        return RedirectResponse(url=redirect_url, status_code=303)

    logger.info("No seasons yet, rendering landing page")
    return request.app.state.templates.TemplateResponse(
        request,
        "home.html",
        {"current_year": datetime.now().year},
    )


@router.get("/season/{season_id}", response_class=HTMLResponse)
async def season_detail(
    request: Request,
    season_id: int = Path(ge=1, le=MAX_ROW_ID),
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Render the season dashboard: switcher, visited/to-visit lists, games and the add-game form."""
    logger.info(f"Rendering season {season_id}")
    page = await build_season_page(db, season_id)
    if page is None:
        raise HTTPException(status_code=404, detail="Season not found")

    return request.app.state.templates.TemplateResponse(
        request,
        "season.html",
        {
            "seasons": page.seasons,
            "current_season": page.current_season,
            "visited_players": page.visited_players,
            "to_visit_players": page.to_visit_players,
            "games": page.games,
            "all_players": page.all_players,
            "current_date": page.current_date.isoformat(),
            "current_year": page.current_date.year,
            "is_latest_season": page.is_latest_season,
        },
    )
