"""Unit tests for game form parsing."""

from datetime import date

import pytest

from app.services.game_form_service import (
    MAX_ROW_ID,
    GameDateFormData,
    GameFormData,
    ParsedGameData,
    ParsedGameDate,
    parse_game_date_form,
    parse_game_form,
)


def _form(**overrides: str | None) -> GameFormData:
    values: dict = {
        "season_id": "1",
        "host_id": "2",
        "winner_id": "3",
        "second_place_id": "4",
        "game_date": "2025-06-01",
    }
    values.update(overrides)
    return GameFormData(**values)


class TestParseGameForm:
    """Tests for parse_game_form() function."""

    def test_parses_complete_form(self):
        result = parse_game_form(_form())
        assert result == ParsedGameData(
            season_id=1,
            host_id=2,
            game_date=date(2025, 6, 1),
            winner_id=3,
            second_place_id=4,
        )

    def test_empty_result_fields_become_none(self):
        result = parse_game_form(_form(winner_id="", second_place_id=None))
        assert isinstance(result, ParsedGameData)
        assert result.winner_id is None
        assert result.second_place_id is None

    def test_strips_whitespace(self):
        result = parse_game_form(_form(season_id=" 7 ", game_date=" 2025-06-01 "))
        assert isinstance(result, ParsedGameData)
        assert result.season_id == 7
        assert result.game_date == date(2025, 6, 1)

    def test_same_player_in_every_role_is_accepted(self):
        """Only types are checked; roles may repeat."""
        result = parse_game_form(_form(host_id="2", winner_id="2", second_place_id="2"))
        assert isinstance(result, ParsedGameData)

    def test_rejects_non_numeric_season(self):
        assert parse_game_form(_form(season_id="summer")) == "Invalid season ID"

    def test_rejects_missing_host(self):
        assert parse_game_form(_form(host_id="")) == "Invalid host ID"

    def test_rejects_non_numeric_winner(self):
        assert parse_game_form(_form(winner_id="bob")) == "Invalid winner ID"

    def test_rejects_non_numeric_second_place(self):
        assert parse_game_form(_form(second_place_id="x")) == "Invalid second place ID"

    def test_rejects_bad_date(self):
        assert parse_game_form(_form(game_date="06/01/2025")) == (
            "Invalid date format. Use YYYY-MM-DD."
        )

    @pytest.mark.parametrize(
        "value",
        [str(2**31), str(2**63), "0", "-3", "1_000", "\u0661\u0662", "1.0", "0x10"],
    )
    def test_rejects_malformed_or_out_of_range_host(self, value: str):
        assert parse_game_form(_form(host_id=value)) == "Invalid host ID"

    def test_accepts_largest_integer_id(self):
        result = parse_game_form(_form(season_id=str(MAX_ROW_ID), host_id="+2"))
        assert isinstance(result, ParsedGameData)
        assert result.season_id == MAX_ROW_ID
        assert result.host_id == 2

    @pytest.mark.parametrize("value", [str(2**63), "9_9"])
    def test_rejects_malformed_or_out_of_range_winner(self, value: str):
        assert parse_game_form(_form(winner_id=value)) == "Invalid winner ID"


class TestParseGameDateForm:
    """Tests for parse_game_date_form() function."""

    def test_parses_form(self):
        result = parse_game_date_form(
            GameDateFormData(game_id="5", season_id="1", new_date="2025-07-04")
        )
        assert result == ParsedGameDate(game_id=5, season_id=1, new_date=date(2025, 7, 4))

    def test_rejects_bad_game_id(self):
        result = parse_game_date_form(
            GameDateFormData(game_id="five", season_id="1", new_date="2025-07-04")
        )
        assert result == "Invalid game ID"

    def test_rejects_bad_date(self):
        result = parse_game_date_form(
            GameDateFormData(game_id="5", season_id="1", new_date="2025-13-01")
        )
        assert result == "Invalid date format. Use YYYY-MM-DD."

    @pytest.mark.parametrize("value", [str(2**31), str(2**63), "0"])
    def test_rejects_out_of_range_game_id(self, value: str):
        result = parse_game_date_form(
            GameDateFormData(game_id=value, season_id="1", new_date="2025-07-04")
        )
        assert result == "Invalid game ID"
