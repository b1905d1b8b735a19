from __future__ import annotations

from typing import Optional

from ..core.constants import TAX_ID_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return value.strip()


def require_tax_id(value: Optional[str]) -> str:
    """CUIL/CUIT: exactly 11 numeric digits."""
    v = (value or "").strip()
    if len(v) != TAX_ID_LENGTH or not (v.isascii() and v.isdigit()):
        raise ValidationError(f"El CUIL debe tener {TAX_ID_LENGTH} dígitos numéricos")
    return v


def require_non_negative(value, field_name: str) -> int:
    try:
        number = int(value or 0)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser un número")
    if number < 0:
        raise ValidationError(f"{field_name} no puede ser negativo")
    return number
