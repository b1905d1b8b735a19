from __future__ import annotations

from typing import Protocol, Sequence

from .model import InspectionRecord


class InspectionRepository(Protocol):
    def list_all(self) -> Sequence[InspectionRecord]:
        raise NotImplementedError

    def create(self, record: InspectionRecord) -> InspectionRecord:
        raise NotImplementedError
