from __future__ import annotations

from typing import Sequence

from ..store.connection import ApiConnection
from .mapping import from_row, to_sheet_row
from .model import InfractionRecord


class RemoteInfractionRepository:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[InfractionRecord]:
        rows = self._conn.get_list("getInfractions")
        return [from_row(r) for r in rows if isinstance(r, dict)]

    def create(self, record: InfractionRecord) -> InfractionRecord:
        body = to_sheet_row(record)
        body.pop("id")
        return from_row(self._conn.post_record("saveInfraction", body))
