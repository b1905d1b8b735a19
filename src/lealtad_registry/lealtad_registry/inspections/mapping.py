from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso
from ..common.rows import LAWS_SEPARATOR, as_bool, pick, safe_date, safe_int, split_laws
from .model import InspectionRecord


def from_row(row: Dict[str, Any]) -> InspectionRecord:
    return InspectionRecord(
        id=safe_int(pick(row, "id", "ID", default=0)),
        inspection_date=safe_date(pick(row, "fecha", "FECHA")),
        ref=str(pick(row, "ref", "REF")),
        inspector1=str(pick(row, "inspector1", "INSPECTOR 1")),
        inspector2=str(pick(row, "inspector2", "INSPECTOR 2")),
        locality=str(pick(row, "localidad", "LOCALIDAD")),
        legal_name=str(pick(row, "razonSocial", "RAZON SOCIAL")),
        trade_name=str(pick(row, "fantasia", "FANTASIA")),
        tax_id=str(pick(row, "cuil", "CUIL")),
        laws=split_laws(pick(row, "leyes", "LEYES", default=())),
        ex_officio=as_bool(
            pick(row, "esActuacionDeOficio", "DE OFICIO", "ES ACTUACION DE OFICIO", default=False)
        ),
    )


def to_row(rec: InspectionRecord) -> Dict[str, Any]:
    return {
        "id": rec.id,
        "fecha": to_iso(rec.inspection_date),
        "ref": rec.ref,
        "inspector1": rec.inspector1,
        "inspector2": rec.inspector2,
        "localidad": rec.locality,
        "razonSocial": rec.legal_name,
        "fantasia": rec.trade_name,
        "cuil": rec.tax_id,
        "leyes": list(rec.laws),
        "esActuacionDeOficio": rec.ex_officio,
    }


def to_sheet_row(rec: InspectionRecord) -> Dict[str, Any]:
    row = to_row(rec)
    row["leyes"] = LAWS_SEPARATOR.join(rec.laws)
    row["esActuacionDeOficio"] = "SI" if rec.ex_officio else "NO"
    return row
