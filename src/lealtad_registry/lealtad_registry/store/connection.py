from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    url: str
    timeout_seconds: int = DEFAULT_API_TIMEOUT_SECONDS


class ApiConnection:
    """Client for the spreadsheet web endpoint.

    Every operation is a single request to the same URL; the ``action`` query
    parameter selects it. Reads are GET, writes are POST with a JSON body sent
    as text/plain (the Apps Script runtime rejects preflighted content types).
    A JSON object carrying an ``error`` key is a failed operation.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def url(self) -> str:
        return self._config.url

    def request(self, action: str, *, method: str = "GET", body: Optional[dict] = None) -> Any:
        params = {"action": action, "_t": int(time.time() * 1000)}
        headers = {"Content-Type": "text/plain;charset=utf-8"}
        data = json.dumps(body) if method == "POST" and body is not None else None

        try:
            resp = self._session.request(
                method,
                self._config.url,
                params=params,
                headers=headers,
                data=data,
                timeout=self._config.timeout_seconds,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Request %s failed: %s", action, e)
            raise StoreError(f"No se pudo contactar al servidor ({action})") from e

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning("Invalid JSON from %s: %s", action, resp.text[:300])
            raise StoreError(f"Respuesta inválida del servidor ({action})") from e

        if isinstance(payload, dict) and payload.get("error"):
            logger.warning("Endpoint rejected %s: %s", action, payload["error"])
            raise StoreError(str(payload["error"]))
        return payload

    def get(self, action: str) -> Any:
        return self.request(action)

    def post(self, action: str, body: dict) -> Any:
        return self.request(action, method="POST", body=body)

    def get_list(self, action: str) -> List[Any]:
        """Read action whose payload must be a JSON list."""
        payload = self.get(action)
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning("Unexpected payload from %s: %r", action, payload)
            raise StoreError(f"Respuesta inesperada del servidor ({action})")
        return payload

    def post_record(self, action: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Save action; returns ``body`` merged with whatever the server echoed.

        The sheet assigns ids. When the response carries none the merged row
        keeps no id and the caller's record stays unnumbered.
        """
        saved = self.post(action, body)
        if not isinstance(saved, dict):
            logger.warning("%s returned no record (%r); id not assigned", action, saved)
            return dict(body)
        if not saved.get("id") and not saved.get("ID"):
            logger.warning("%s did not return an id", action)
        return {**body, **saved}
