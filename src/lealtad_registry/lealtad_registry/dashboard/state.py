from __future__ import annotations

import logging
import threading
from datetime import date
from typing import List, Optional

from ..core.exceptions import RecordNotFoundError
from ..infractions.model import InfractionRecord
from ..infractions.service import InfractionService
from ..inspections.model import InspectionRecord
from ..inspections.service import InspectionService
from ..notifications.model import NotificationRecord
from ..notifications.service import NotificationService
from .statistics import DashboardStats, compute_dashboard, search_notifications

logger = logging.getLogger(__name__)


class DashboardState:
    """View-model owning the record snapshot behind the dashboard.

    Lifecycle: ``refresh`` loads all three collections and pages call it on
    every view; ``invalidate`` marks the snapshot stale so the next read
    reloads it. Notification edits and deletes are applied to the snapshot
    first and rolled back to the pre-operation list if the store rejects them.
    """

    def __init__(
        self,
        notifications: NotificationService,
        infractions: InfractionService,
        inspections: InspectionService,
    ):
        self._notification_service = notifications
        self._infraction_service = infractions
        self._inspection_service = inspections
        self._lock = threading.RLock()
        self._loaded = False
        self.notifications: List[NotificationRecord] = []
        self.infractions: List[InfractionRecord] = []
        self.inspections: List[InspectionRecord] = []

    @property
    def loaded(self) -> bool:
        return self._loaded

    def refresh(self) -> None:
        with self._lock:
            notifications = list(self._notification_service.list_all())
            infractions = list(self._infraction_service.list_all())
            inspections = list(self._inspection_service.list_all())
            self.notifications = notifications
            self.infractions = infractions
            self.inspections = inspections
            self._loaded = True
        logger.debug(
            "Dashboard refreshed: %s notifications, %s infractions, %s inspections",
            len(notifications),
            len(infractions),
            len(inspections),
        )

    def invalidate(self) -> None:
        with self._lock:
            self._loaded = False

    def ensure_loaded(self) -> None:
        with self._lock:
            if not self._loaded:
                self.refresh()

    def stats(self, *, today: Optional[date] = None) -> DashboardStats:
        with self._lock:
            self.ensure_loaded()
            return compute_dashboard(self.notifications, self.infractions, self.inspections, today=today)

    def search(self, term: str) -> List[NotificationRecord]:
        with self._lock:
            self.ensure_loaded()
            return search_notifications(self.notifications, term)

    def get_notification(self, record_id: int) -> NotificationRecord:
        with self._lock:
            self.ensure_loaded()
            for n in self.notifications:
                if n.id == int(record_id):
                    return n
        raise RecordNotFoundError(f"Notificación #{record_id} inexistente")

    def update_notification(self, record: NotificationRecord) -> NotificationRecord:
        with self._lock:
            self.ensure_loaded()
            previous = list(self.notifications)
            self.notifications = [record if n.id == record.id else n for n in previous]
            try:
                saved = self._notification_service.update(record)
            except Exception:
                self.notifications = previous
                logger.warning("Update of notification %s failed; snapshot rolled back", record.id)
                raise
            self.notifications = [saved if n.id == saved.id else n for n in self.notifications]
            return saved

    def delete_notification(self, record_id: int) -> None:
        with self._lock:
            self.ensure_loaded()
            previous = list(self.notifications)
            self.notifications = [n for n in previous if n.id != int(record_id)]
            try:
                self._notification_service.delete(record_id=int(record_id))
            except Exception:
                self.notifications = previous
                logger.warning("Delete of notification %s failed; snapshot rolled back", record_id)
                raise
