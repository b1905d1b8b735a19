from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List

from ..core.exceptions import StoreError

# Fixed keys, one JSON list per record kind.
NOTIFICATIONS_KEY = "db_notifications"
INFRACTIONS_KEY = "db_infractions"
INSPECTIONS_KEY = "db_inspections"
COMPANIES_KEY = "db_companies"
CUSTOM_LAWS_KEY = "db_custom_laws"


class LocalStore:
    """JSON-file fallback used when no remote endpoint is configured.

    Note: One file per key under ``directory``; writes go through a temp file
    and ``os.replace`` so a crash never leaves a half-written list.
    """

    def __init__(self, directory: Path):
        self._dir = Path(directory)
        self._lock = threading.RLock()

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def has(self, key: str) -> bool:
        return self._path(key).exists()

    def read(self, key: str) -> List[Any]:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return []
            try:
                data = json.loads(path.read_text(encoding="utf-8") or "[]")
            except (OSError, ValueError) as e:
                raise StoreError(f"No se pudo leer {path.name}") from e
        return list(data) if isinstance(data, list) else []

    def write(self, key: str, rows: List[Any]) -> None:
        path = self._path(key)
        with self._lock:
            try:
                self._dir.mkdir(parents=True, exist_ok=True)
                fd, tmp = tempfile.mkstemp(dir=str(self._dir), suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(rows, f, ensure_ascii=False, indent=2)
                os.replace(tmp, path)
            except OSError as e:
                raise StoreError(f"No se pudo guardar {path.name}") from e

    @contextmanager
    def editing(self, key: str) -> Iterator[List[Any]]:
        """Read-modify-write under the store lock.

        The yielded list is written back only if the block exits cleanly.
        """
        with self._lock:
            rows = self.read(key)
            yield rows
            self.write(key, rows)


def next_id(rows: List[dict]) -> int:
    ids = [int(r.get("id") or 0) for r in rows]
    return max(ids) + 1 if ids else 1
