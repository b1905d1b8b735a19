from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..companies.service import CompanyService
from ..core.constants import DEPARTAMENTOS, INSPECTORES
from ..core.enums import Area, NotifType
from ..core.exceptions import ValidationError
from .model import NotificationRecord
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewNotification:
    ref: str
    against: str
    addressed_to: str
    year: Optional[int] = None
    area: str = Area.CONSUMIDOR.value
    department: str = DEPARTAMENTOS[0]
    type: str = NotifType.AUDIENCIA.value
    hearing_date: Optional[date] = None
    notifier: str = INSPECTORES[0]
    notified_on: Optional[date] = None


class NotificationService:
    def __init__(self, notifications: NotificationRepository, companies: CompanyService):
        self._notifications = notifications
        self._companies = companies

    @staticmethod
    def _validate_type(value: str) -> str:
        try:
            return NotifType(value).value
        except ValueError:
            raise ValidationError("Tipo de notificación inválido")

    def list_all(self) -> Sequence[NotificationRecord]:
        return self._notifications.list_all()

    def create(self, data: NewNotification) -> NotificationRecord:
        ref = require_non_empty(data.ref, "Referencia")
        against = require_non_empty(data.against, "Contra")
        addressed_to = require_non_empty(data.addressed_to, "Dirigido a")
        notif_type = self._validate_type(data.type)

        today = today_local()
        record = NotificationRecord(
            id=0,
            entry_date=today,
            ref=ref,
            year=int(data.year or today.year),
            area=data.area,
            department=data.department,
            type=notif_type,
            addressed_to=addressed_to,
            against=against,
            hearing_date=data.hearing_date,
            notifier=data.notifier,
            notified_on=data.notified_on,
        )
        saved = self._notifications.create(record)
        self._companies.register_after_save(addressed_to)
        logger.info("Notification %s saved (ref=%s)", saved.id, saved.ref)
        return saved

    def update(self, record: NotificationRecord) -> NotificationRecord:
        """Inline edit from the dashboard; only the editable fields change."""
        record = dataclasses.replace(
            record,
            ref=require_non_empty(record.ref, "Referencia"),
            addressed_to=require_non_empty(record.addressed_to, "Dirigido a"),
        )
        self._notifications.update(record)
        self._companies.register_after_save(record.addressed_to)
        logger.info("Notification %s updated", record.id)
        return record

    def delete(self, *, record_id: int) -> None:
        if int(record_id) <= 0:
            raise ValidationError("Notificación inválida")
        self._notifications.delete(record_id=int(record_id))
        logger.info("Notification %s deleted", record_id)
