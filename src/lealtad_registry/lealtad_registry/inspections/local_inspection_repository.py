from __future__ import annotations

import dataclasses
from typing import Sequence

from ..store.local_base import INSPECTIONS_KEY, LocalStore, next_id
from .mapping import from_row, to_row
from .model import InspectionRecord


class LocalInspectionRepository:
    def __init__(self, store: LocalStore):
        self._store = store

    def list_all(self) -> Sequence[InspectionRecord]:
        return [from_row(r) for r in self._store.read(INSPECTIONS_KEY)]

    def create(self, record: InspectionRecord) -> InspectionRecord:
        with self._store.editing(INSPECTIONS_KEY) as rows:
            saved = dataclasses.replace(record, id=next_id(rows))
            rows.append(to_row(saved))
        return saved
