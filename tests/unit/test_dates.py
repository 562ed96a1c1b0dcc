"""Unit tests for date helpers."""

from datetime import date

import pytest

from app.utils.dates import display_date, parse_form_date


class TestParseFormDate:
    """Tests for parse_form_date() function."""

    def test_parses_iso_date(self):
        assert parse_form_date("2025-06-01") == date(2025, 6, 1)

    def test_strips_surrounding_whitespace(self):
        assert parse_form_date(" 2025-06-01\n") == date(2025, 6, 1)

    @pytest.mark.parametrize(
        "value",
        [None, "", "2025-6-1", "20250601", "2025/06/01", "2025-02-30", "2025-06-01T10:00"],
    )
    def test_rejects_other_formats(self, value):
        assert parse_form_date(value) is None


class TestDisplayDate:
    """Tests for display_date() function."""

    def test_formats_day_month_year(self):
        assert display_date(date(2025, 6, 1)) == "01.06.2025"

    def test_none_is_empty(self):
        assert display_date(None) == ""
