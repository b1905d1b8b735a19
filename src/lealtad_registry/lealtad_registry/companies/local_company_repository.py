from __future__ import annotations

from typing import Sequence

from ..store.local_base import COMPANIES_KEY, LocalStore


class LocalCompanyRepository:
    def __init__(self, store: LocalStore):
        self._store = store

    def list_names(self) -> Sequence[str]:
        return [str(n) for n in self._store.read(COMPANIES_KEY)]

    def add(self, name: str) -> None:
        with self._store.editing(COMPANIES_KEY) as names:
            if name not in names:
                names.append(name)
                names.sort()
