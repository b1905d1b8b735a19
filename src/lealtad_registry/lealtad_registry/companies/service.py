from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import StoreError
from .repository import CompanyRepository

logger = logging.getLogger(__name__)


class CompanyService:
    """Autocomplete registry of company names (free text, no integrity)."""

    def __init__(self, companies: CompanyRepository):
        self._companies = companies

    def list_names(self) -> Sequence[str]:
        return self._companies.list_names()

    def register(self, name: Optional[str]) -> None:
        name = (name or "").strip()
        if not name:
            return
        self._companies.add(name)
        logger.debug("Company registered: %s", name)

    def register_after_save(self, name: Optional[str]) -> None:
        """Register once the record itself is stored; failures are only logged."""
        try:
            self.register(name)
        except StoreError as e:
            logger.warning("Company %r not registered: %s", name, e)
