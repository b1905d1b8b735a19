from __future__ import annotations

from typing import List

from ..common.validators import require_non_empty
from ..core.constants import LEYES_OPTIONS
from .repository import CustomLawRepository


def normalize_law_label(label: str) -> str:
    return " ".join(label.split()).upper()


class LawCatalogService:
    def __init__(self, custom_laws: CustomLawRepository):
        self._custom = custom_laws

    def list_all(self) -> List[str]:
        """Base options plus custom labels, deduplicated and sorted."""
        return sorted(set(LEYES_OPTIONS) | set(self._custom.list_labels()))

    def list_custom(self) -> List[str]:
        return list(self._custom.list_labels())

    def add_custom(self, label: str) -> str:
        value = normalize_law_label(require_non_empty(label, "Ley o artículo"))
        if value not in LEYES_OPTIONS:
            self._custom.add(value)
        return value
