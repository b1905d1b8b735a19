from __future__ import annotations

from typing import Sequence

from ..store.connection import ApiConnection


class RemoteCompanyRepository:
    """Company names collected server-side.

    The script appends to its company sheet while saving each record, so
    ``add`` has nothing to send.
    """

    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_names(self) -> Sequence[str]:
        names = self._conn.get_list("getCompanies")
        return sorted({str(n).strip() for n in names if str(n).strip()})

    def add(self, name: str) -> None:
        return None
