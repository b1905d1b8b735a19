from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def form_date(value: Optional[str], field_name: str = "Fecha") -> Optional[date]:
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} inválida (AAAA-MM-DD)")


def form_int(value: Optional[str], field_name: str, default: int = 0) -> int:
    v = (value or "").strip()
    if not v:
        return default
    try:
        return int(v)
    except ValueError:
        raise ValidationError(f"{field_name} debe ser un número")


def form_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "on", "true", "si", "sí"}
