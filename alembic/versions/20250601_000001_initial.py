"""Initial schema for seasons, players, memberships and games.

Revision ID: 20250601_000001
Revises:
Create Date: 2025-06-01 00:00:01
"""

from alembic import op  # type: ignore[attr-defined]
import sqlalchemy as sa

revision = "20250601_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "seasons",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
    )

    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_players_name", "players", ["name"], unique=False)

    op.create_table(
        "season_players",
        sa.Column(
            "season_id", sa.Integer(), sa.ForeignKey("seasons.id"), primary_key=True
        ),
        sa.Column(
            "player_id", sa.Integer(), sa.ForeignKey("players.id"), primary_key=True
        ),
    )
    op.create_index(
        "ix_season_players_player_id", "season_players", ["player_id"], unique=False
    )

    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column(
            "season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False
        ),
        sa.Column("host_id", sa.Integer(), sa.ForeignKey("players.id"), nullable=False),
        # Result columns stay NULL until the game has been played
        sa.Column("winner_id", sa.Integer(), sa.ForeignKey("players.id"), nullable=True),
        sa.Column(
            "second_place_id", sa.Integer(), sa.ForeignKey("players.id"), nullable=True
        ),
        sa.Column("game_date", sa.Date(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_games_season_id", "games", ["season_id"], unique=False)
    op.create_index("ix_games_host_id", "games", ["host_id"], unique=False)
    op.create_index("ix_games_game_date", "games", ["game_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_games_game_date", table_name="games")
    op.drop_index("ix_games_host_id", table_name="games")
    op.drop_index("ix_games_season_id", table_name="games")
    op.drop_table("games")
    op.drop_index("ix_season_players_player_id", table_name="season_players")
    op.drop_table("season_players")
    op.drop_index("ix_players_name", table_name="players")
    op.drop_table("players")
    op.drop_table("seasons")
