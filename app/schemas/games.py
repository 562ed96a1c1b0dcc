"""Games played within a season."""

from datetime import date
from typing import Optional

from sqlmodel import Field

from app.schemas.base import CreatedAtMixin


class Game(CreatedAtMixin, table=True):  # type: ignore[call-arg]
    """A single poker night.

    Winner and second place stay NULL until the result is recorded; they are
    not required to be members of the season, nor distinct from the host.
    """

    __tablename__ = "games"

    id: Optional[int] = Field(default=None, primary_key=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)
    host_id: int = Field(foreign_key="players.id", index=True)
    winner_id: Optional[int] = Field(default=None, foreign_key="players.id")
    second_place_id: Optional[int] = Field(default=None, foreign_key="players.id")
    game_date: date = Field(index=True)
