from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Deadline:
    """Plazo de descargo: días hábiles otorgados y fecha límite resultante."""

    business_days: int
    due_date: date
