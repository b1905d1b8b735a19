"""Helpers shared by the sheet row mappers."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple
from datetime import date

from .datetime_utils import parse_optional_date

LAWS_SEPARATOR = ", "


def pick(row: Dict[str, Any], *keys: str, default: Any = "") -> Any:
    for k in keys:
        v = row.get(k)
        if v not in (None, ""):
            return v
    return default


def safe_date(value: Any) -> Optional[date]:
    try:
        return parse_optional_date(value)
    except ValueError:
        return None


def safe_int(value: Any, default: int = 0) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().upper() in {"SI", "SÍ", "TRUE", "1"}


def split_laws(value: Any) -> Tuple[str, ...]:
    """Laws arrive as a list or as the sheet's ``", "``-joined string."""
    if value in (None, ""):
        return ()
    if isinstance(value, str):
        items: Iterable[str] = value.split(LAWS_SEPARATOR)
    else:
        items = value
    return tuple(str(v) for v in items if str(v).strip())
