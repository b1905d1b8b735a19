from __future__ import annotations

from datetime import date, datetime

import pytest

from src.lealtad_registry.lealtad_registry.core.exceptions import ValidationError
from src.lealtad_registry.lealtad_registry.infractions.model import InfractionRecord
from src.lealtad_registry.lealtad_registry.inspections.model import InspectionRecord
from src.lealtad_registry.lealtad_registry.notifications.model import NotificationRecord
from src.lealtad_registry.lealtad_registry.reports.service import ReportService


def _notif(nid, entry, type="AUDIENCIA"):
    return NotificationRecord(
        id=nid,
        entry_date=entry,
        ref=f"EXP-{nid}",
        year=entry.year,
        area="LEALTAD COMERCIAL",
        department="Capital",
        type=type,
        addressed_to="ACME",
        against="Juan",
        hearing_date=None,
        notifier="Ponce",
    )


def _infraction(iid, entry, *, expired=0, seized=0, laws=("LEY 24240",)):
    return InfractionRecord(
        id=iid,
        digital_number=f"D-{iid}",
        entry_date=entry,
        act_number="",
        act_date=entry,
        inspector1="Nieva",
        inspector2="",
        locality="Capital",
        legal_name="ACME",
        trade_name="",
        tax_id="20123456789",
        laws=tuple(laws),
        expired_count=expired,
        seized_count=seized,
        rebuttal_days=10,
        rebuttal_deadline=None,
        status="Pendiente",
    )


def _inspection(iid, day, ex_officio=False):
    return InspectionRecord(
        id=iid,
        inspection_date=day,
        ref="",
        inspector1="Nieva",
        inspector2="",
        locality="Capital",
        legal_name="ACME",
        trade_name="",
        tax_id="",
        laws=(),
        ex_officio=ex_officio,
    )


def test_report_filters_inclusive_range_and_aggregates():
    notifications = [
        _notif(1, date(2025, 7, 1)),
        _notif(2, date(2025, 7, 10), type="AUTO DE IMPUTACIÓN"),
        _notif(3, date(2025, 7, 11)),
        _notif(4, date(2025, 6, 30)),
    ]
    infractions = [
        _infraction(1, date(2025, 7, 1), expired=3, seized=1, laws=("LEY 24240", "ART. N° 42 CN")),
        _infraction(2, date(2025, 7, 5), expired=2, laws=("ley 24240",)),
        _infraction(3, date(2025, 8, 1), expired=100),
    ]
    inspections = [_inspection(1, date(2025, 7, 2), True), _inspection(2, date(2025, 7, 3)), _inspection(3, date(2025, 7, 20), True)]

    report = ReportService().build_period_report(
        start=date(2025, 7, 1),
        end=date(2025, 7, 10),
        notifications=notifications,
        infractions=infractions,
        inspections=inspections,
        issued_at=datetime(2025, 7, 11, 9, 30),
    )

    assert report.days == 10
    assert report.total_notifications == 2
    assert report.audiences == 1
    assert report.imputations == 1
    assert report.total_infractions == 2
    assert report.expired_products == 5
    assert report.seized_products == 1
    assert report.total_inspections == 2
    assert report.ex_officio == 1
    assert report.law_ranking == [("LEY 24240", 2), ("ART. N° 42 CN", 1)]
    assert report.daily_notifications == 0.2
    assert report.daily_infractions == 0.2


def test_single_day_range():
    report = ReportService().build_period_report(
        start=date(2025, 7, 1),
        end=date(2025, 7, 1),
        notifications=[_notif(1, date(2025, 7, 1))],
        infractions=[],
        inspections=[],
    )
    assert report.days == 1
    assert report.daily_notifications == 1.0


def test_missing_dates_rejected():
    with pytest.raises(ValidationError, match="rango de fechas"):
        ReportService().build_period_report(start=None, end=date(2025, 7, 1), notifications=[], infractions=[], inspections=[])


def test_inverted_range_rejected():
    with pytest.raises(ValidationError):
        ReportService().build_period_report(
            start=date(2025, 7, 10), end=date(2025, 7, 1), notifications=[], infractions=[], inspections=[]
        )
