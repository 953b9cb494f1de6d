"""Hazard category classification and hazard table lookup."""

from __future__ import annotations

import re

from ingredient_lens.hazards.data import (
    CHEMICAL_HAZARDS,
    GENERIC_PLACEHOLDER,
    MICROBIAL_HAZARDS,
    PHYSICAL_HAZARDS,
)
from ingredient_lens.schema import HazardCategory, HazardEntry, HazardProfile

DEFAULT_CATEGORY = HazardCategory.PRODUCE

# Exact English search terms. First matching set wins.
CATEGORY_KEYWORDS: tuple[tuple[HazardCategory, frozenset[str]], ...] = (
    (HazardCategory.PRODUCE, frozenset({
        "apple", "strawberry", "grape", "tomato", "garlic", "pear", "peach", "banana",
        "orange", "mandarin", "watermelon", "melon", "persimmon", "blueberry", "kiwi",
        "lemon", "napa cabbage", "cabbage", "onion", "potato", "sweet potato", "carrot",
        "spinach", "lettuce", "cucumber", "pumpkin", "radish", "green onion", "broccoli",
        "mushroom", "eggplant", "chili pepper", "bell pepper",
    })),
    (HazardCategory.LIVESTOCK, frozenset({
        "beef", "pork", "chicken", "duck", "lamb", "egg", "milk", "cheese", "butter",
        "yogurt", "ham", "sausage", "bacon",
    })),
    (HazardCategory.SEAFOOD, frozenset({
        "salmon", "tuna", "mackerel", "shrimp", "squid", "octopus", "oyster", "clam",
        "crab", "anchovy", "laver", "seaweed", "abalone", "pollock",
    })),
    (HazardCategory.GRAIN, frozenset({
        "wheat flour", "bread flour", "all-purpose flour", "cake flour", "rice",
        "brown rice", "barley", "oats", "corn", "buckwheat", "bread", "noodles", "tofu",
        "soybean",
    })),
    (HazardCategory.FOOD_ADDITIVE, frozenset({
        "aspartame", "saccharin", "sucralose", "stevia", "sodium nitrite",
        "sodium benzoate", "potassium sorbate", "monosodium glutamate", "carrageenan",
        "food additives",
    })),
    (HazardCategory.SPICE, frozenset({
        "pepper", "basil", "cinnamon", "red pepper powder", "turmeric", "ginger", "clove",
        "nutmeg", "cumin", "rosemary", "wasabi", "sansho", "spices",
    })),
    (HazardCategory.MEDICINAL_HERB, frozenset({
        "ginseng", "red ginseng", "licorice", "jujube", "angelica root", "astragalus",
        "schisandra", "goji berry", "mugwort", "cassia seed", "kudzu root", "poria",
    })),
)

# Provider (FDC foodCategory) patterns. First match wins.
PROVIDER_CATEGORY_PATTERNS: tuple[tuple[HazardCategory, re.Pattern], ...] = (
    (HazardCategory.PRODUCE, re.compile(r"fruit|vegetable", re.IGNORECASE)),
    (HazardCategory.LIVESTOCK, re.compile(r"meat|beef|pork|poultry|dairy|egg|lamb|sausage", re.IGNORECASE)),
    (HazardCategory.SEAFOOD, re.compile(r"fish|seafood|shellfish", re.IGNORECASE)),
    (HazardCategory.GRAIN, re.compile(r"grain|cereal|flour|bread|baked|pasta", re.IGNORECASE)),
    (HazardCategory.FOOD_ADDITIVE, re.compile(r"additive|sweetener", re.IGNORECASE)),
    (HazardCategory.SPICE, re.compile(r"spice|herb", re.IGNORECASE)),
)

# Korean/Japanese keywords matched against the untranslated query.
RAW_QUERY_PATTERNS: tuple[tuple[HazardCategory, re.Pattern], ...] = (
    (HazardCategory.PRODUCE, re.compile(r"과일|채소|야채|나물|果物|野菜")),
    (HazardCategory.LIVESTOCK, re.compile(r"고기|육류|우유|유제품|계란|肉|乳製品|卵")),
    (HazardCategory.SEAFOOD, re.compile(r"생선|어류|수산|해산물|조개|젓갈|魚|貝|海産")),
    (HazardCategory.GRAIN, re.compile(r"곡물|곡류|가루|빵|면류|떡|穀物|粉|麺")),
    (HazardCategory.FOOD_ADDITIVE, re.compile(r"첨가물|감미료|보존료|색소|添加物|甘味料|保存料")),
    (HazardCategory.SPICE, re.compile(r"향신료|양념|스파이스|香辛料|スパイス")),
    (HazardCategory.MEDICINAL_HERB, re.compile(r"한약|약초|약재|생약|인삼|漢方|薬草|生薬|人参")),
)


def classify(
    canonical_query: str | None,
    provider_category: str | None = None,
    raw_query: str | None = None,
) -> HazardCategory:
    """Resolve a search to exactly one hazard category.

    Order: exact keyword match on the English term, then the provider's food
    category, then source-script keywords in the raw query. Anything left
    over falls back to produce.
    """
    term = (canonical_query or "").strip().lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if term in keywords:
            return category

    if provider_category:
        for category, pattern in PROVIDER_CATEGORY_PATTERNS:
            if pattern.search(provider_category):
                return category

    if raw_query:
        for category, pattern in RAW_QUERY_PATTERNS:
            if pattern.search(raw_query):
                return category

    return DEFAULT_CATEGORY


def _entries(table, category) -> list[HazardEntry]:
    rows = table.get(category, GENERIC_PLACEHOLDER)
    return [
        HazardEntry(name=name, risk=risk, probability=probability, control=control)
        for name, risk, probability, control in rows
    ]


def hazards_for(category: HazardCategory) -> HazardProfile:
    """Look up the microbial, chemical and physical tables for a category."""
    return HazardProfile(
        category=category,
        microbial=_entries(MICROBIAL_HAZARDS, category),
        chemical=_entries(CHEMICAL_HAZARDS, category),
        physical=_entries(PHYSICAL_HAZARDS, category),
    )
