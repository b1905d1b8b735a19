"""Holiday calendars for the business-day calculator.

The built-in table covers the Argentine national holidays of 2024 and 2025.
Outside those years only weekends are skipped, so deployments should point
``HOLIDAYS_FILE`` at an up-to-date list.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from ..common.datetime_utils import parse_iso_date

ARG_HOLIDAYS_2024_2025 = (
    # 2024
    "2024-01-01", "2024-02-12", "2024-02-13", "2024-03-24", "2024-03-29",
    "2024-04-01", "2024-04-02", "2024-05-01", "2024-05-25", "2024-06-17",
    "2024-06-20", "2024-06-21", "2024-07-09", "2024-08-17", "2024-10-11",
    "2024-10-12", "2024-11-18", "2024-12-08", "2024-12-25",
    # 2025
    "2025-01-01", "2025-03-03", "2025-03-04", "2025-03-24", "2025-04-02",
    "2025-04-18", "2025-05-01", "2025-05-25", "2025-06-20", "2025-07-09",
    "2025-08-17", "2025-10-12", "2025-11-20", "2025-12-08", "2025-12-25",
)


def holiday_set(values: Iterable[str]) -> FrozenSet[date]:
    return frozenset(parse_iso_date(v) for v in values)


def parse_holiday_lines(text: str) -> FrozenSet[date]:
    """One ISO date per line; blank lines and ``#`` comments are ignored."""
    values = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            values.append(line)
    return holiday_set(values)


def load_holidays(path: Optional[Path] = None) -> FrozenSet[date]:
    if path is None:
        return holiday_set(ARG_HOLIDAYS_2024_2025)
    return parse_holiday_lines(Path(path).read_text(encoding="utf-8"))
