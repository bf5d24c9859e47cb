"""Core utility functions for recordkeeper.

Small parsing helpers shared by the field rules, the services and the CLI.
All of them are total: malformed input yields None rather than an exception.
"""

from __future__ import annotations

import calendar
import math
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, timezone
from typing import Any, Optional

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

SECONDS_PER_DAY = 86400


def is_blank(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings.

    Non-string values (numbers, booleans) are never blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def as_text(value: Any) -> str:
    """Coerce a raw field value to text; None becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def parse_leading_int(value: Any) -> Optional[int]:
    """Parse the leading integer of a raw value.

    Mirrors how form inputs are read: ``"42"`` and ``"42 hours"`` give 42,
    ``"abc"`` and ``""`` give None. Booleans are rejected.

    Examples:
        >>> parse_leading_int("120h")
        120
        >>> parse_leading_int("x") is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    match = _LEADING_INT_RE.match(as_text(value))
    if not match:
        return None
    return int(match.group(1))


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date or datetime value into a naive UTC datetime.

    Accepts `date`/`datetime` objects and ISO 8601 strings (``2024-01-31``,
    ``2024-01-31T09:30:00``, ``2024-01-31T09:30:00Z``). Returns None when the
    value is blank or cannot be parsed.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is not None:
        try:
            dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
        except (OverflowError, ValueError):
            return None
    return dt


def start_of_day(value: datetime) -> datetime:
    """Drop the time part of a datetime."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def add_months(value: datetime, months: int) -> Optional[datetime]:
    """Shift a datetime by whole calendar months.

    The day is clamped to the last day of the target month, so
    ``2024-01-31 + 1 month`` is ``2024-02-29``. Returns None when the result
    falls outside the years datetime can represent.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    if not MINYEAR <= year <= MAXYEAR:
        return None
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def duration_days(start: datetime, end: datetime) -> int:
    """Number of days between two datetimes, rounded up.

    Examples:
        >>> duration_days(datetime(2024, 1, 1), datetime(2024, 6, 1))
        152
    """
    seconds = abs((end - start).total_seconds())
    return math.ceil(seconds / SECONDS_PER_DAY)
