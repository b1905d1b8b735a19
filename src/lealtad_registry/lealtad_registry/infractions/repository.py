from __future__ import annotations

from typing import Protocol, Sequence

from .model import InfractionRecord


class InfractionRepository(Protocol):
    def list_all(self) -> Sequence[InfractionRecord]:
        raise NotImplementedError

    def create(self, record: InfractionRecord) -> InfractionRecord:
        raise NotImplementedError
