from datetime import date, datetime
from typing import Optional

from pydantic import computed_field
from sqlmodel import SQLModel


class SeasonRead(SQLModel):
    id: int
    name: str
    created_at: datetime


class PlayerRead(SQLModel):
    id: int
    name: str
    created_at: datetime


class PlayerStatus(PlayerRead):
    """A season member annotated with whether they hosted in that season.

    ``hosted_on`` is the earliest hosting date when the player hosted more
    than once; only that one date is surfaced.
    """

    hosted_on: Optional[date] = None

    @computed_field  # type: ignore[misc]
    @property
    def has_hosted(self) -> bool:
        return self.hosted_on is not None


class GameRead(SQLModel):
    """Game row with host, winner and second place names resolved."""

    id: int
    season_id: int
    host_id: int
    winner_id: Optional[int] = None
    second_place_id: Optional[int] = None
    game_date: date
    created_at: datetime

    host_name: str
    winner_name: Optional[str] = None
    second_place_name: Optional[str] = None
