from __future__ import annotations

from typing import Protocol, Sequence


class CustomLawRepository(Protocol):
    def list_labels(self) -> Sequence[str]:
        raise NotImplementedError

    def add(self, label: str) -> None:
        raise NotImplementedError
