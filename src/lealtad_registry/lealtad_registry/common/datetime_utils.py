from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse the leading YYYY-MM-DD of a string into a calendar date.

    The date is built from its year/month/day components so a value such as
    ``2025-07-07T03:00:00.000Z`` (how the sheet serialises dates) keeps its
    calendar day instead of being shifted by a timezone conversion.
    """
    parts = value.strip()[:10].split("-")
    if len(parts) != 3:
        raise ValueError(f"Invalid date string: {value!r}")
    year, month, day = (int(p) for p in parts)
    return date(year, month, day)


def parse_optional_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    return parse_iso_date(text)


def to_iso(value: Optional[date]) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def format_display(value: Optional[date]) -> str:
    """dd/mm/YYYY as printed on forms and reports."""
    return value.strftime("%d/%m/%Y") if value else "-"


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now().date()


def days_until(target: date, *, today: Optional[date] = None) -> int:
    """Whole calendar days from today to target (negative when past)."""
    today = today or today_local()
    return (target - today).days
