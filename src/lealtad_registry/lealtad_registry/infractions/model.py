from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class InfractionRecord:
    """Acta de infracción labrada en una inspección.

    ``rebuttal_days``/``rebuttal_deadline`` are computed once at creation from
    the act date and the violated laws; the record is not edited afterwards.
    """

    id: int
    digital_number: str
    entry_date: Optional[date]
    act_number: str
    act_date: Optional[date]
    inspector1: str
    inspector2: str
    locality: str
    legal_name: str
    trade_name: str
    tax_id: str
    laws: Tuple[str, ...]
    expired_count: int
    seized_count: int
    rebuttal_days: int
    rebuttal_deadline: Optional[date]
    status: str
    rebuttal_filed: bool = False
    rebuttal_date: Optional[date] = None
