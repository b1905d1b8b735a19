from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Optional

from ..model import Deadline


class DeadlineCalculator(ABC):
    """Calculator interface (Strategy Pattern for legal deadlines)."""

    @abstractmethod
    def compute(self, start: Optional[date], laws: Iterable[str], *, today: Optional[date] = None) -> Deadline:
        raise NotImplementedError
