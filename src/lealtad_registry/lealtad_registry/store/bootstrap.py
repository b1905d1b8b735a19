from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import to_iso, today_local
from ..core.enums import Area, NotifType
from .local_base import COMPANIES_KEY, NOTIFICATIONS_KEY, LocalStore

DEMO_COMPANY = "Supermercado X"


def seed_demo_data(store: LocalStore, *, today: Optional[date] = None) -> bool:
    """Seed one pending audience so the dashboard has something to show.

    Only touches a store that has never held notifications. Returns True when
    data was written.
    """
    if store.has(NOTIFICATIONS_KEY):
        return False

    today = today or today_local()
    store.write(
        NOTIFICATIONS_KEY,
        [
            {
                "id": 1,
                "fechaIngreso": to_iso(today),
                "ref": "EXP-001",
                "anio": today.year,
                "area": Area.LEALTAD.value,
                "departamento": "Capital",
                "tipo": NotifType.AUDIENCIA.value,
                "dirigidoA": DEMO_COMPANY,
                "contra": "Juan Perez",
                "fechaAudiencia": to_iso(today + timedelta(days=5)),
                "notificador": "Ponce",
                "notificado": "",
            }
        ],
    )
    with store.editing(COMPANIES_KEY) as names:
        if DEMO_COMPANY not in names:
            names.append(DEMO_COMPANY)
            names.sort()
    return True
