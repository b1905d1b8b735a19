from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso
from ..common.rows import LAWS_SEPARATOR, as_bool, pick, safe_date, safe_int, split_laws
from ..core.enums import InfractionStatus
from .model import InfractionRecord


def from_row(row: Dict[str, Any]) -> InfractionRecord:
    return InfractionRecord(
        id=safe_int(pick(row, "id", "ID", default=0)),
        digital_number=str(pick(row, "numeroDigital", "NUMERO DIGITAL")),
        entry_date=safe_date(pick(row, "fechaIngreso", "FECHA INGRESO")),
        act_number=str(pick(row, "ref", "REF")),
        act_date=safe_date(pick(row, "fechaActa", "FECHA ACTA")),
        inspector1=str(pick(row, "inspector1", "INSPECTOR 1")),
        inspector2=str(pick(row, "inspector2", "INSPECTOR 2")),
        locality=str(pick(row, "localidad", "LOCALIDAD")),
        legal_name=str(pick(row, "razonSocial", "RAZON SOCIAL")),
        trade_name=str(pick(row, "fantasia", "FANTASIA")),
        tax_id=str(pick(row, "cuil", "CUIL")),
        laws=split_laws(pick(row, "leyes", "LEYES", default=())),
        expired_count=safe_int(pick(row, "vencido", "VENCIDO", default=0)),
        seized_count=safe_int(pick(row, "decomiso", "DECOMISO", default=0)),
        rebuttal_days=safe_int(pick(row, "diasDescargo", "DIAS DESCARGO", default=0)),
        rebuttal_deadline=safe_date(pick(row, "fechaLimiteDescargo", "FECHA LIMITE DESCARGO")),
        status=str(pick(row, "estado", "ESTADO", default=InfractionStatus.PENDIENTE.value)),
        rebuttal_filed=as_bool(pick(row, "presentoDescargo", "PRESENTO DESCARGO", default=False)),
        rebuttal_date=safe_date(pick(row, "fechaDescargo", "FECHA DESCARGO")),
    )


def to_row(rec: InfractionRecord) -> Dict[str, Any]:
    return {
        "id": rec.id,
        "numeroDigital": rec.digital_number,
        "fechaIngreso": to_iso(rec.entry_date),
        "ref": rec.act_number,
        "fechaActa": to_iso(rec.act_date),
        "inspector1": rec.inspector1,
        "inspector2": rec.inspector2,
        "localidad": rec.locality,
        "razonSocial": rec.legal_name,
        "fantasia": rec.trade_name,
        "cuil": rec.tax_id,
        "leyes": list(rec.laws),
        "vencido": rec.expired_count,
        "decomiso": rec.seized_count,
        "diasDescargo": rec.rebuttal_days,
        "fechaLimiteDescargo": to_iso(rec.rebuttal_deadline),
        "estado": rec.status,
        "presentoDescargo": rec.rebuttal_filed,
        "fechaDescargo": to_iso(rec.rebuttal_date),
    }


def to_sheet_row(rec: InfractionRecord) -> Dict[str, Any]:
    """Same as ``to_row`` with laws flattened into one cell."""
    row = to_row(rec)
    row["leyes"] = LAWS_SEPARATOR.join(rec.laws)
    return row
