from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence, Tuple

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty, require_tax_id
from ..companies.service import CompanyService
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..infractions.service import unique_laws
from .model import InspectionRecord
from .repository import InspectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewInspection:
    legal_name: str
    inspection_date: Optional[date] = None
    ref: str = ""
    inspector1: str = INSPECTORES[0]
    inspector2: str = ""
    locality: str = DEPARTAMENTOS[0]
    trade_name: str = ""
    tax_id: str = ""
    laws: Tuple[str, ...] = field(default_factory=tuple)
    ex_officio: bool = False


class InspectionService:
    def __init__(self, inspections: InspectionRepository, companies: CompanyService):
        self._inspections = inspections
        self._companies = companies

    def list_all(self) -> Sequence[InspectionRecord]:
        return self._inspections.list_all()

    def next_id(self) -> int:
        ids = [r.id for r in self._inspections.list_all()]
        return max(ids) + 1 if ids else 1

    def create(self, data: NewInspection) -> InspectionRecord:
        legal_name = require_non_empty(data.legal_name, "Razón social")
        # CUIL is optional on inspections, but must be well formed when given.
        tax_id = require_tax_id(data.tax_id) if (data.tax_id or "").strip() else ""

        record = InspectionRecord(
            id=0,
            inspection_date=data.inspection_date or today_local(),
            ref=(data.ref or "").strip(),
            inspector1=data.inspector1,
            inspector2=data.inspector2 or "",
            locality=data.locality,
            legal_name=legal_name,
            trade_name=(data.trade_name or "").strip(),
            tax_id=tax_id,
            laws=unique_laws(data.laws),
            ex_officio=bool(data.ex_officio),
        )
        saved = self._inspections.create(record)
        self._companies.register_after_save(legal_name)
        logger.info("Inspection %s saved (de oficio=%s)", saved.id, saved.ex_officio)
        return saved
