"""Row <-> record conversion for the notifications sheet.

Rows written by the web form use camelCase keys while rows typed directly in
the spreadsheet come back under the column headers, so reads accept both.
"""
from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso, today_local
from ..common.rows import pick, safe_date, safe_int
from .model import NotificationRecord


def from_row(row: Dict[str, Any]) -> NotificationRecord:
    return NotificationRecord(
        id=safe_int(pick(row, "id", "ID", default=0)),
        entry_date=safe_date(pick(row, "fechaIngreso", "FECHA INGRESO")),
        ref=str(pick(row, "ref", "REF")),
        year=safe_int(pick(row, "anio", "ANIO"), default=today_local().year),
        area=str(pick(row, "area", "AREA")),
        department=str(pick(row, "departamento", "DEPARTAMENTO")),
        type=str(pick(row, "tipo", "TIPO")),
        addressed_to=str(pick(row, "dirigidoA", "DIRIGIDO A")),
        against=str(pick(row, "contra", "CONTRA")),
        hearing_date=safe_date(pick(row, "fechaAudiencia", "FECHA AUDIENCIA")),
        notifier=str(pick(row, "notificador", "NOTIFICADOR")),
        notified_on=safe_date(pick(row, "notificado", "NOTIFICADO", "FECHA NOTIFICACION")),
    )


def to_row(rec: NotificationRecord) -> Dict[str, Any]:
    return {
        "id": rec.id,
        "fechaIngreso": to_iso(rec.entry_date),
        "ref": rec.ref,
        "anio": rec.year,
        "area": rec.area,
        "departamento": rec.department,
        "tipo": rec.type,
        "dirigidoA": rec.addressed_to,
        "contra": rec.against,
        "fechaAudiencia": to_iso(rec.hearing_date),
        "notificador": rec.notifier,
        "notificado": to_iso(rec.notified_on),
    }


def to_update_payload(rec: NotificationRecord) -> Dict[str, Any]:
    """Update body: form keys plus the sheet headers the script matches on."""
    payload = to_row(rec)
    payload.update(
        {
            "ID": rec.id,
            "NOTIFICADO": to_iso(rec.notified_on),
            "FECHA NOTIFICACION": to_iso(rec.notified_on),
            "REF": rec.ref,
            "DIRIGIDO A": rec.addressed_to,
            "FECHA AUDIENCIA": to_iso(rec.hearing_date),
            "NOTIFICADOR": rec.notifier,
        }
    )
    return payload
