from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import NotifType
from ..core.exceptions import ValidationError
from ..dashboard.statistics import Ranking, count_ex_officio, rank_laws
from ..infractions.model import InfractionRecord
from ..inspections.model import InspectionRecord
from ..notifications.model import NotificationRecord


@dataclass(frozen=True)
class PeriodReport:
    start: date
    end: date
    issued_at: datetime
    total_notifications: int
    total_infractions: int
    total_inspections: int
    audiences: int
    imputations: int
    ex_officio: int
    expired_products: int
    seized_products: int
    law_ranking: Ranking
    daily_notifications: float
    daily_infractions: float

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


def _within(value: Optional[date], start: date, end: date) -> bool:
    return value is not None and start <= value <= end


class ReportService:
    """Builds the printable management report for a date range.

    Notifications and infractions are selected by entry date, inspections by
    inspection date; both ends of the range are inclusive.
    """

    def build_period_report(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        notifications: Sequence[NotificationRecord],
        infractions: Sequence[InfractionRecord],
        inspections: Sequence[InspectionRecord],
        issued_at: Optional[datetime] = None,
    ) -> PeriodReport:
        if not start or not end:
            raise ValidationError("Seleccione un rango de fechas")
        if end < start:
            raise ValidationError("La fecha fin debe ser posterior a la fecha inicio")

        r_notifs = [n for n in notifications if _within(n.entry_date, start, end)]
        r_infractions = [i for i in infractions if _within(i.entry_date, start, end)]
        r_inspections = [i for i in inspections if _within(i.inspection_date, start, end)]

        days = (end - start).days + 1
        return PeriodReport(
            start=start,
            end=end,
            issued_at=issued_at or datetime.now(),
            total_notifications=len(r_notifs),
            total_infractions=len(r_infractions),
            total_inspections=len(r_inspections),
            audiences=sum(1 for n in r_notifs if n.type == NotifType.AUDIENCIA.value),
            imputations=sum(1 for n in r_notifs if n.type == NotifType.IMPUTACION.value),
            ex_officio=count_ex_officio(r_inspections),
            expired_products=sum(i.expired_count for i in r_infractions),
            seized_products=sum(i.seized_count for i in r_infractions),
            law_ranking=rank_laws(r_infractions),
            daily_notifications=round(len(r_notifs) / days, 1),
            daily_infractions=round(len(r_infractions) / days, 1),
        )
