"""Validate translation dictionary and hazard table consistency.

Checks:
1. Query dictionary keys are stored stripped and lowercased.
2. Every query dictionary value has an exact-match hazard keyword set.
3. Display dictionary has no duplicate source keys.
4. Every hazard category has non-empty microbial/chemical/physical tables.

Display keys that are substrings of later keys are reported as warnings;
they change rendered text but are kept in their current order.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ingredient_lens.hazards.classifier import CATEGORY_KEYWORDS  # noqa: E402
from ingredient_lens.hazards.data import CHEMICAL_HAZARDS, MICROBIAL_HAZARDS, PHYSICAL_HAZARDS  # noqa: E402
from ingredient_lens.schema import HazardCategory  # noqa: E402
from ingredient_lens.translation.repository import DictionaryRepository  # noqa: E402

DATA_ROOT = SRC / "ingredient_lens" / "translation" / "data"


def fail(message: str) -> None:
    print(f"[dictionary-check] ERROR: {message}")
    raise SystemExit(1)


def warn(message: str) -> None:
    print(f"[dictionary-check] WARNING: {message}")


def validate_query_keys(query_terms) -> None:
    for key in query_terms:
        if key != key.strip().lower():
            fail(f"Query key is not normalized: {key!r}")


def validate_query_coverage(query_terms) -> None:
    keywords = set().union(*(terms for _, terms in CATEGORY_KEYWORDS))
    missing = sorted(set(query_terms.values()) - keywords)
    if missing:
        fail(f"Search terms without hazard keyword category: {', '.join(missing)}")


def validate_display_rules(display_rules) -> None:
    seen: set[str] = set()
    sources = [rule.source for rule in display_rules]
    for index, source in enumerate(sources):
        lowered = source.lower()
        if lowered in seen:
            fail(f"Duplicate display key: {source!r}")
        seen.add(lowered)
        for later in sources[index + 1:]:
            if lowered in later.lower():
                warn(f"{source!r} is applied before {later!r} and will split it")


def validate_hazard_tables() -> None:
    for label, table in (
        ("microbial", MICROBIAL_HAZARDS),
        ("chemical", CHEMICAL_HAZARDS),
        ("physical", PHYSICAL_HAZARDS),
    ):
        for category in HazardCategory:
            if not table.get(category):
                fail(f"Missing {label} hazards for {category.name}")


def iter_dictionary_versions() -> list[str]:
    versions = [
        path.name
        for path in sorted(DATA_ROOT.iterdir())
        if path.is_dir() and (path / "__init__.py").exists()
    ]
    if not versions:
        fail(f"No dictionary versions found under {DATA_ROOT}")
    return versions


def main() -> int:
    for version in iter_dictionary_versions():
        repo = DictionaryRepository(version=version)
        validate_query_keys(repo.query_terms)
        validate_query_coverage(repo.query_terms)
        validate_display_rules(repo.display_rules)

    validate_hazard_tables()
    print("[dictionary-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
