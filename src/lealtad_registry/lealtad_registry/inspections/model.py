from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..core.constants import EX_OFFICIO_LAW_LABEL


@dataclass(frozen=True)
class InspectionRecord:
    id: int
    inspection_date: Optional[date]
    ref: str
    inspector1: str
    inspector2: str
    locality: str
    legal_name: str
    trade_name: str
    tax_id: str
    laws: Tuple[str, ...]
    ex_officio: bool = False

    @property
    def is_ex_officio(self) -> bool:
        """Stored flag, or the sentinel label used by older sheet rows."""
        if self.ex_officio:
            return True
        sentinel = EX_OFFICIO_LAW_LABEL.upper()
        return any(law.strip().upper() == sentinel for law in self.laws)
