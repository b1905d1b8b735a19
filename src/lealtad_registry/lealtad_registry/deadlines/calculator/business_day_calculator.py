from __future__ import annotations

from datetime import date, timedelta
from typing import FrozenSet, Iterable, Optional

from ...common.datetime_utils import today_local
from ...core.constants import SHORT_DEADLINE_DAYS, SHORT_DEADLINE_MARKERS, STANDARD_DEADLINE_DAYS
from ..model import Deadline
from .base import DeadlineCalculator

ONE_DAY = timedelta(days=1)


def requires_short_deadline(laws: Iterable[str]) -> bool:
    """True when any selected law invokes art. 5 of Ley 24240."""
    return any(marker in (law or "") for law in laws for marker in SHORT_DEADLINE_MARKERS)


class BusinessDayCalculator(DeadlineCalculator):
    """Standard rule: count forward skipping Saturdays, Sundays and holidays."""

    def __init__(
        self,
        holidays: FrozenSet[date] = frozenset(),
        *,
        short_days: int = SHORT_DEADLINE_DAYS,
        standard_days: int = STANDARD_DEADLINE_DAYS,
    ):
        self._holidays = frozenset(holidays)
        self._short_days = short_days
        self._standard_days = standard_days

    def is_business_day(self, day: date) -> bool:
        return day.weekday() < 5 and day not in self._holidays

    def add_business_days(self, start: date, days: int) -> date:
        if days < 0:
            raise ValueError("days must be >= 0")
        cursor = start
        remaining = days
        while remaining > 0:
            cursor += ONE_DAY
            if self.is_business_day(cursor):
                remaining -= 1
        return cursor

    def count_business_days(self, start: date, end: date) -> int:
        """Business days in (start, end]."""
        count = 0
        cursor = end
        while cursor > start:
            if self.is_business_day(cursor):
                count += 1
            cursor -= ONE_DAY
        return count

    def term_for(self, laws: Iterable[str]) -> int:
        return self._short_days if requires_short_deadline(laws) else self._standard_days

    def compute(self, start: Optional[date], laws: Iterable[str], *, today: Optional[date] = None) -> Deadline:
        start = start or today or today_local()
        days = self.term_for(list(laws))
        return Deadline(business_days=days, due_date=self.add_business_days(start, days))
