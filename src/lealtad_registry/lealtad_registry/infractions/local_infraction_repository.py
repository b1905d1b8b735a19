from __future__ import annotations

import dataclasses
from typing import Sequence

from ..store.local_base import INFRACTIONS_KEY, LocalStore, next_id
from .mapping import from_row, to_row
from .model import InfractionRecord


class LocalInfractionRepository:
    def __init__(self, store: LocalStore):
        self._store = store

    def list_all(self) -> Sequence[InfractionRecord]:
        return [from_row(r) for r in self._store.read(INFRACTIONS_KEY)]

    def create(self, record: InfractionRecord) -> InfractionRecord:
        with self._store.editing(INFRACTIONS_KEY) as rows:
            saved = dataclasses.replace(record, id=next_id(rows))
            rows.append(to_row(saved))
        return saved
