"""Dictionary repository for term translation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from importlib import import_module
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DisplayRule:
    source: str
    target: str
    pattern: re.Pattern


class DictionaryRepository:
    """Loads query and display dictionaries from packaged data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        module = self._load_module()
        self.query_terms: Mapping[str, str] = MappingProxyType(dict(module.QUERY_TERMS))
        self.display_rules: tuple[DisplayRule, ...] = tuple(
            DisplayRule(
                source=source,
                target=target,
                pattern=re.compile(re.escape(source), re.IGNORECASE),
            )
            for source, target in module.DISPLAY_TERMS
        )

    def _load_module(self):
        try:
            return import_module(f"ingredient_lens.translation.data.{self.version}")
        except ModuleNotFoundError as exc:
            raise ValueError(f"Unknown dictionary version: {self.version}") from exc
