"""Date and rounding helpers shared by the engines.

Dates travel as ISO ``YYYY-MM-DD`` strings and are compared
lexicographically; timestamps are ISO 8601 strings. Percentages use
half-up integer rounding so threshold checks such as ``>= 90`` agree with
the browser client at boundary values.
"""

from __future__ import annotations

import calendar
import math
import re
from datetime import date, datetime, timedelta, timezone

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding towards +infinity."""
    return math.floor(value + 0.5)


def round_to(value: float, decimals: int) -> float:
    factor = 10 ** decimals
    return round_half_up(value * factor) / factor


def percent(numerator: float, denominator: float) -> int:
    """Integer percentage, 0 when the denominator is empty."""
    if not denominator:
        return 0
    return round_half_up((numerator / denominator) * 100)


def today_ymd() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def parse_ymd(ymd: str) -> date | None:
    if not ymd or not _ISO_DATE_RE.match(ymd):
        return None
    try:
        return date.fromisoformat(ymd)
    except ValueError:
        return None


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp or bare date; naive values are taken as UTC."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def date_add_days(ymd: str, days: int) -> str:
    """Shift a ``YYYY-MM-DD`` date by ``days``; empty string if unparseable."""
    parsed = parse_ymd(ymd)
    if parsed is None:
        return ""
    return (parsed + timedelta(days=days)).isoformat()


def days_between(start_ymd: str, end_ymd: str) -> int:
    """Whole days from start to end, clamped at 0; 0 if either is unparseable."""
    start = parse_ymd(start_ymd)
    end = parse_ymd(end_ymd)
    if start is None or end is None:
        return 0
    return max(0, (end - start).days)


def last_day_of_month(ymd: str) -> str:
    year, month = int(ymd[0:4]), int(ymd[5:7])
    last = calendar.monthrange(year, month)[1]
    return f"{year:04d}-{month:02d}-{last:02d}"


def month_label(ymd: str) -> str:
    """``2024-03-15`` → ``March 2024`` (English, locale-independent)."""
    year, month = int(ymd[0:4]), int(ymd[5:7])
    return f"{calendar.month_name[month]} {year}"
