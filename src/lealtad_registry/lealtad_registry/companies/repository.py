from __future__ import annotations

from typing import Protocol, Sequence


class CompanyRepository(Protocol):
    def list_names(self) -> Sequence[str]:
        raise NotImplementedError

    def add(self, name: str) -> None:
        """Record a company name seen on a saved act (no-op if known)."""

        raise NotImplementedError
