"""Date parsing and display helpers for game dates."""

import re
from datetime import date

_FORM_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_form_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` form value.

    Only the dash-separated four/two/two digit form is accepted; anything
    else (including other ISO 8601 spellings) returns None.
    """
    if value is None:
        return None
    text = value.strip()
    if not _FORM_DATE_RE.match(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def display_date(value: date | None) -> str:
    """Render a date as ``DD.MM.YYYY``; empty string for None."""
    if value is None:
        return ""
    return value.strftime("%d.%m.%Y")
