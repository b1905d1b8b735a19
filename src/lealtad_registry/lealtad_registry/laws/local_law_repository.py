from __future__ import annotations

from typing import Sequence

from ..store.local_base import CUSTOM_LAWS_KEY, LocalStore


class LocalCustomLawRepository:
    """Custom law labels live next to the app even when records are remote."""

    def __init__(self, store: LocalStore):
        self._store = store

    def list_labels(self) -> Sequence[str]:
        return [str(v) for v in self._store.read(CUSTOM_LAWS_KEY)]

    def add(self, label: str) -> None:
        with self._store.editing(CUSTOM_LAWS_KEY) as labels:
            if label not in labels:
                labels.append(label)
                labels.sort()
