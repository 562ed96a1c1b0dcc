from typing import Optional
from sqlmodel import SQLModel, Field

from app.schemas.base import CreatedAtMixin


class Season(CreatedAtMixin, table=True):  # type: ignore[call-arg]
    __tablename__ = "seasons"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(description="Season label like 'Summer 2025'")


class SeasonPlayer(SQLModel, table=True):  # type: ignore[call-arg]
    """Membership of a player in a season. Created at season setup only."""

    __tablename__ = "season_players"

    season_id: int = Field(foreign_key="seasons.id", primary_key=True)
    player_id: int = Field(foreign_key="players.id", primary_key=True, index=True)
