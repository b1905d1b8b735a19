from __future__ import annotations

import dataclasses
from typing import Sequence

from ..core.exceptions import RecordNotFoundError
from ..store.local_base import NOTIFICATIONS_KEY, LocalStore, next_id
from .mapping import from_row, to_row
from .model import NotificationRecord


class LocalNotificationRepository:
    def __init__(self, store: LocalStore):
        self._store = store

    def list_all(self) -> Sequence[NotificationRecord]:
        return [from_row(r) for r in self._store.read(NOTIFICATIONS_KEY)]

    def create(self, record: NotificationRecord) -> NotificationRecord:
        with self._store.editing(NOTIFICATIONS_KEY) as rows:
            saved = dataclasses.replace(record, id=next_id(rows))
            rows.append(to_row(saved))
        return saved

    def update(self, record: NotificationRecord) -> None:
        with self._store.editing(NOTIFICATIONS_KEY) as rows:
            for i, row in enumerate(rows):
                if int(row.get("id") or 0) == record.id:
                    rows[i] = to_row(record)
                    break
            else:
                raise RecordNotFoundError(f"Notificación #{record.id} inexistente")

    def delete(self, *, record_id: int) -> None:
        with self._store.editing(NOTIFICATIONS_KEY) as rows:
            kept = [r for r in rows if int(r.get("id") or 0) != int(record_id)]
            if len(kept) == len(rows):
                raise RecordNotFoundError(f"Notificación #{record_id} inexistente")
            rows[:] = kept
