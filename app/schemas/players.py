"""
SQLModels for players, to be stored in the database.
"""
from typing import Optional
from sqlmodel import Field

from app.schemas.base import CreatedAtMixin


class Player(CreatedAtMixin, table=True):  # type: ignore[call-arg]
    """Global player identity; season membership lives in ``season_players``."""

    __tablename__ = "players"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
