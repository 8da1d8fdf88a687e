"""Strict MM/DD/YYYY date parsing and MM/YYYY rendering."""

from __future__ import annotations

import re
from datetime import date

from work_history.errors import DateFormatError

_DATE_PATTERN = re.compile(r"(?P<month>[0-9]{2})/(?P<day>[0-9]{2})/(?P<year>[0-9]{4})")


def parse_date(text: str, *, role: str = "date", row_number: int | None = None) -> date:
    """Parse a date written exactly as MM/DD/YYYY.

    Single-digit months or days, other separators, surrounding whitespace and
    impossible calendar dates (13/01/2020, 02/30/2021) are all rejected with
    DateFormatError. ``role`` and ``row_number`` only feed the error message.
    """
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise DateFormatError(text, role=role, row_number=row_number)
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        raise DateFormatError(text, role=role, row_number=row_number) from None


def format_month_year(value: date) -> str:
    """Render a date as MM/YYYY."""
    return f"{value.month:02d}/{value.year:04d}"
