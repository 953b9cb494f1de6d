"""Base provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ingredient_lens.schema import ProviderNutritionRecord


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a nutrition lookup: records on success, an error code otherwise."""

    ok: bool
    records: list[ProviderNutritionRecord] = field(default_factory=list)
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, records: list[ProviderNutritionRecord]) -> "LookupResult":
        return cls(ok=True, records=list(records))

    @classmethod
    def failure(cls, error_code: str, error_message: str) -> "LookupResult":
        return cls(ok=False, error_code=error_code, error_message=error_message)


class BaseProvider(ABC):
    """Abstract base class for ingredient data sources."""

    name: str = "base"

    @abstractmethod
    def fetch(self, query: str) -> Any:
        """Fetch provider data for a query.

        Implementations never raise for upstream failures; they return
        substitute data instead.
        """
        pass
