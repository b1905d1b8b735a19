from __future__ import annotations

from typing import Protocol, Sequence

from .model import NotificationRecord


class NotificationRepository(Protocol):
    def list_all(self) -> Sequence[NotificationRecord]:
        raise NotImplementedError

    def create(self, record: NotificationRecord) -> NotificationRecord:
        """Persist a new notification.

        The incoming ``id`` is ignored; returns the record with its assigned id.
        """

        raise NotImplementedError

    def update(self, record: NotificationRecord) -> None:
        raise NotImplementedError

    def delete(self, *, record_id: int) -> None:
        raise NotImplementedError
