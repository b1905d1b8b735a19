"""Aggregate statistics over an in-memory snapshot of the three registries.

Every function here is pure: same snapshot and same ``today`` give the same
result. The dashboard recomputes everything on each render.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.datetime_utils import days_until, today_local
from ..core.constants import (
    AUDIENCE_ALERT_MAX_DAYS,
    AUDIENCE_ALERT_MIN_DAYS,
    TOP_COMPANIES_LIMIT,
    TOP_LAWS_LIMIT,
)
from ..core.enums import NotifType
from ..infractions.model import InfractionRecord
from ..inspections.model import InspectionRecord
from ..notifications.model import NotificationRecord

Ranking = List[Tuple[str, int]]


@dataclass(frozen=True)
class UpcomingAudience:
    notification: NotificationRecord
    days_left: int

    @property
    def overdue(self) -> bool:
        return self.days_left < 0


@dataclass(frozen=True)
class DashboardStats:
    total_notifications: int
    total_infractions: int
    total_inspections: int
    notifications_by_type: Dict[str, int]
    ex_officio_count: int
    law_ranking: Ranking
    company_ranking: Ranking
    upcoming_audiences: List[UpcomingAudience] = field(default_factory=list)

    def count_for(self, notif_type: NotifType) -> int:
        return self.notifications_by_type.get(notif_type.value, 0)


def normalize_label(label: str) -> str:
    return (label or "").strip().upper()


def rank(counter: Counter, limit: Optional[int]) -> Ranking:
    """Descending by count, ties broken alphabetically."""
    ordered = sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
    return ordered[:limit] if limit is not None else ordered


def count_by_type(notifications: Iterable[NotificationRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {t.value: 0 for t in NotifType}
    for n in notifications:
        key = n.type or "Desconocido"
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_ex_officio(inspections: Iterable[InspectionRecord]) -> int:
    return sum(1 for i in inspections if i.is_ex_officio)


def rank_laws(infractions: Iterable[InfractionRecord], *, limit: Optional[int] = TOP_LAWS_LIMIT) -> Ranking:
    counter: Counter = Counter()
    for infraction in infractions:
        for law in infraction.laws:
            label = normalize_label(law)
            if label:
                counter[label] += 1
    return rank(counter, limit)


def rank_companies(
    notifications: Iterable[NotificationRecord], *, limit: Optional[int] = TOP_COMPANIES_LIMIT
) -> Ranking:
    counter: Counter = Counter()
    for n in notifications:
        name = (n.addressed_to or "").strip()
        if name:
            counter[name] += 1
    return rank(counter, limit)


def upcoming_audiences(
    notifications: Iterable[NotificationRecord],
    *,
    today: Optional[date] = None,
    min_days: int = AUDIENCE_ALERT_MIN_DAYS,
    max_days: int = AUDIENCE_ALERT_MAX_DAYS,
) -> List[UpcomingAudience]:
    """Pending audiences due within the alert window (nearest first)."""
    today = today or today_local()
    out: List[UpcomingAudience] = []
    for n in notifications:
        if n.is_notified or not n.is_audience or not n.hearing_date:
            continue
        days = days_until(n.hearing_date, today=today)
        if min_days <= days <= max_days:
            out.append(UpcomingAudience(notification=n, days_left=days))
    out.sort(key=lambda u: (u.days_left, u.notification.id))
    return out


def compute_dashboard(
    notifications: Sequence[NotificationRecord],
    infractions: Sequence[InfractionRecord],
    inspections: Sequence[InspectionRecord],
    *,
    today: Optional[date] = None,
) -> DashboardStats:
    return DashboardStats(
        total_notifications=len(notifications),
        total_infractions=len(infractions),
        total_inspections=len(inspections),
        notifications_by_type=count_by_type(notifications),
        ex_officio_count=count_ex_officio(inspections),
        law_ranking=rank_laws(infractions),
        company_ranking=rank_companies(notifications),
        upcoming_audiences=upcoming_audiences(notifications, today=today),
    )


def search_notifications(notifications: Iterable[NotificationRecord], term: str) -> List[NotificationRecord]:
    """Case-insensitive match on id, reference, company or person."""
    term = (term or "").strip().lower()
    if not term:
        return list(notifications)
    return [
        n
        for n in notifications
        if term in str(n.id)
        or term in (n.ref or "").lower()
        or term in (n.addressed_to or "").lower()
        or term in (n.against or "").lower()
    ]
