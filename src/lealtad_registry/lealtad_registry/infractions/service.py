from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence, Tuple

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty, require_non_negative, require_tax_id
from ..companies.service import CompanyService
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..core.enums import InfractionStatus
from ..deadlines.calculator.base import DeadlineCalculator
from ..deadlines.model import Deadline
from .model import InfractionRecord
from .repository import InfractionRepository

logger = logging.getLogger(__name__)


def unique_laws(laws) -> Tuple[str, ...]:
    """Selected laws behave as a set; keep first-seen order for display."""
    seen: dict[str, None] = {}
    for law in laws or ():
        label = (law or "").strip()
        if label:
            seen.setdefault(label, None)
    return tuple(seen)


@dataclass(frozen=True)
class NewInfraction:
    digital_number: str
    legal_name: str
    tax_id: str
    act_number: str = ""
    act_date: Optional[date] = None
    inspector1: str = INSPECTORES[0]
    inspector2: str = ""
    locality: str = DEPARTAMENTOS[0]
    trade_name: str = ""
    laws: Tuple[str, ...] = field(default_factory=tuple)
    expired_count: int = 0
    seized_count: int = 0
    status: str = InfractionStatus.PENDIENTE.value
    rebuttal_filed: bool = False
    rebuttal_date: Optional[date] = None


class InfractionService:
    def __init__(
        self,
        infractions: InfractionRepository,
        companies: CompanyService,
        calculator: DeadlineCalculator,
    ):
        self._infractions = infractions
        self._companies = companies
        self._calculator = calculator

    def list_all(self) -> Sequence[InfractionRecord]:
        return self._infractions.list_all()

    def next_id(self) -> int:
        """Id the next act will probably get (display only)."""
        ids = [r.id for r in self._infractions.list_all()]
        return max(ids) + 1 if ids else 1

    def preview_deadline(self, act_date: Optional[date], laws) -> Deadline:
        return self._calculator.compute(act_date, unique_laws(laws))

    def create(self, data: NewInfraction) -> InfractionRecord:
        digital_number = require_non_empty(data.digital_number, "Número digital")
        legal_name = require_non_empty(data.legal_name, "Razón social")
        tax_id = require_tax_id(data.tax_id)
        expired = require_non_negative(data.expired_count, "Productos vencidos")
        seized = require_non_negative(data.seized_count, "Decomiso")

        laws = unique_laws(data.laws)
        act_date = data.act_date or today_local()
        deadline = self._calculator.compute(act_date, laws)

        record = InfractionRecord(
            id=0,
            digital_number=digital_number,
            entry_date=today_local(),
            act_number=(data.act_number or "").strip(),
            act_date=act_date,
            inspector1=data.inspector1,
            inspector2=data.inspector2 or "",
            locality=data.locality,
            legal_name=legal_name,
            trade_name=(data.trade_name or "").strip(),
            tax_id=tax_id,
            laws=laws,
            expired_count=expired,
            seized_count=seized,
            rebuttal_days=deadline.business_days,
            rebuttal_deadline=deadline.due_date,
            status=data.status or InfractionStatus.PENDIENTE.value,
            rebuttal_filed=bool(data.rebuttal_filed),
            rebuttal_date=data.rebuttal_date if data.rebuttal_filed else None,
        )
        saved = self._infractions.create(record)
        self._companies.register_after_save(legal_name)
        logger.info(
            "Infraction %s saved (deadline %s, %s business days)",
            saved.id,
            deadline.due_date,
            deadline.business_days,
        )
        return saved
