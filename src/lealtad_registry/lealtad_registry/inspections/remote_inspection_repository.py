from __future__ import annotations

from typing import Sequence

from ..store.connection import ApiConnection
from .mapping import from_row, to_sheet_row
from .model import InspectionRecord


class RemoteInspectionRepository:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[InspectionRecord]:
        rows = self._conn.get_list("getInspections")
        return [from_row(r) for r in rows if isinstance(r, dict)]

    def create(self, record: InspectionRecord) -> InspectionRecord:
        body = to_sheet_row(record)
        body.pop("id")
        return from_row(self._conn.post_record("saveInspection", body))
