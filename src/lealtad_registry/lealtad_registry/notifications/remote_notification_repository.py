from __future__ import annotations

from typing import Sequence

from ..core.exceptions import StoreError
from ..store.connection import ApiConnection
from .mapping import from_row, to_row, to_update_payload
from .model import NotificationRecord


class RemoteNotificationRepository:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[NotificationRecord]:
        rows = self._conn.get_list("getNotifications")
        return [from_row(r) for r in rows if isinstance(r, dict)]

    def create(self, record: NotificationRecord) -> NotificationRecord:
        body = to_row(record)
        body.pop("id")
        return from_row(self._conn.post_record("saveNotification", body))

    def update(self, record: NotificationRecord) -> None:
        result = self._conn.post("updateNotification", to_update_payload(record))
        if not result or (isinstance(result, dict) and result.get("success") is False):
            raise StoreError("El servidor no pudo confirmar la actualización.")

    def delete(self, *, record_id: int) -> None:
        self._conn.post("deleteNotification", {"id": int(record_id)})
