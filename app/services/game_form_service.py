"""Game form parsing.

Turns raw form strings into typed values before any storage access. Only
type parsing happens here: membership of host/winner/second place in the
season and their distinctness are not checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from app.utils.dates import parse_form_date


@dataclass
class GameFormData:
    """Raw add-game form data from request (all strings)."""

    season_id: str
    host_id: str
    game_date: str
    winner_id: str | None = None
    second_place_id: str | None = None


@dataclass
class ParsedGameData:
    """Validated and parsed game data ready for DB operations."""

    season_id: int
    host_id: int
    game_date: date
    winner_id: int | None = None
    second_place_id: int | None = None


@dataclass
class GameDateFormData:
    """Raw update-date form data from request (all strings)."""

    game_id: str
    season_id: str
    new_date: str


@dataclass
class ParsedGameDate:
    game_id: int
    season_id: int
    new_date: date


# Row ids are INTEGER columns
MAX_ROW_ID = 2_147_483_647

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_required_int(val: str | None) -> int | None:
    """Parse a required id form field.

    Returns None when the value is missing, not a plain ASCII integer, or
    outside 1..MAX_ROW_ID.
    """
    if val is None:
        return None
    val = val.strip()
    if not _INT_PATTERN.fullmatch(val):
        return None
    parsed = int(val)
    if not 1 <= parsed <= MAX_ROW_ID:
        return None
    return parsed


def parse_game_form(data: GameFormData) -> ParsedGameData | str:
    """Parse and validate add-game form data, converting strings to typed values.

    Args:
        data: Raw form data

    Returns:
        ParsedGameData if parsing succeeds, error message string if it fails
    """
    season_id = _parse_required_int(data.season_id)
    if season_id is None:
        return "Invalid season ID"

    host_id = _parse_required_int(data.host_id)
    if host_id is None:
        return "Invalid host ID"

    # Winner and second place are optional; empty means "not recorded yet"
    winner_id: int | None = None
    if data.winner_id and data.winner_id.strip():
        winner_id = _parse_required_int(data.winner_id)
        if winner_id is None:
            return "Invalid winner ID"

    second_place_id: int | None = None
    if data.second_place_id and data.second_place_id.strip():
        second_place_id = _parse_required_int(data.second_place_id)
        if second_place_id is None:
            return "Invalid second place ID"

    game_date = parse_form_date(data.game_date)
    if game_date is None:
        return "Invalid date format. Use YYYY-MM-DD."

    return ParsedGameData(
        season_id=season_id,
        host_id=host_id,
        game_date=game_date,
        winner_id=winner_id,
        second_place_id=second_place_id,
    )


def parse_game_date_form(data: GameDateFormData) -> ParsedGameDate | str:
    """Parse the update-date form; returns an error message string on failure."""
    game_id = _parse_required_int(data.game_id)
    if game_id is None:
        return "Invalid game ID"

    season_id = _parse_required_int(data.season_id)
    if season_id is None:
        return "Invalid season ID"

    new_date = parse_form_date(data.new_date)
    if new_date is None:
        return "Invalid date format. Use YYYY-MM-DD."

    return ParsedGameDate(game_id=game_id, season_id=season_id, new_date=new_date)
