from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import NotifType


@dataclass(frozen=True)
class NotificationRecord:
    """Notificación diligenciada por un notificador.

    ``notified_on`` vacío significa que la cédula todavía no fue entregada.
    """

    id: int
    entry_date: Optional[date]
    ref: str
    year: int
    area: str
    department: str
    type: str
    addressed_to: str
    against: str
    hearing_date: Optional[date]
    notifier: str
    notified_on: Optional[date] = None

    @property
    def is_audience(self) -> bool:
        return self.type == NotifType.AUDIENCIA.value

    @property
    def is_notified(self) -> bool:
        return self.notified_on is not None
