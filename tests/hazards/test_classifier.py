"""Tests for hazard classification and hazard tables."""

import pytest

import ingredient_lens.hazards.classifier as classifier_module
from ingredient_lens.hazards import DEFAULT_CATEGORY, classify, hazards_for
from ingredient_lens.schema import HazardCategory
from ingredient_lens.translation.data.v1 import QUERY_TERMS


@pytest.mark.parametrize(
    "term, expected",
    [
        ("apple", HazardCategory.PRODUCE),
        ("beef", HazardCategory.LIVESTOCK),
        ("salmon", HazardCategory.SEAFOOD),
        ("cake flour", HazardCategory.GRAIN),
        ("aspartame", HazardCategory.FOOD_ADDITIVE),
        ("pepper", HazardCategory.SPICE),
        ("ginseng", HazardCategory.MEDICINAL_HERB),
    ],
)
def test_classify_exact_keyword(term, expected):
    assert classify(term) == expected


def test_keyword_wins_over_provider_category():
    assert classify("apple", "Beef Products") == HazardCategory.PRODUCE


@pytest.mark.parametrize(
    "provider_category, expected",
    [
        ("Fruits and Fruit Juices", HazardCategory.PRODUCE),
        ("Vegetables and Vegetable Products", HazardCategory.PRODUCE),
        ("Poultry Products", HazardCategory.LIVESTOCK),
        ("Dairy and Egg Products", HazardCategory.LIVESTOCK),
        ("Finfish and Shellfish Products", HazardCategory.SEAFOOD),
        ("Cereal Grains and Pasta", HazardCategory.GRAIN),
        ("Baked Products", HazardCategory.GRAIN),
        ("Food Additives", HazardCategory.FOOD_ADDITIVE),
        ("Spices and Herbs", HazardCategory.SPICE),
    ],
)
def test_classify_by_provider_category(provider_category, expected):
    assert classify("mystery item", provider_category) == expected


def test_provider_category_first_pattern_wins():
    # Matches both the produce and the livestock patterns.
    assert classify("mystery item", "Fruit and Meat Mix") == HazardCategory.PRODUCE


@pytest.mark.parametrize(
    "raw_query, expected",
    [
        ("제철 과일", HazardCategory.PRODUCE),
        ("다진 고기", HazardCategory.LIVESTOCK),
        ("냉동 생선", HazardCategory.SEAFOOD),
        ("쌀가루", HazardCategory.GRAIN),
        ("합성 감미료", HazardCategory.FOOD_ADDITIVE),
        ("スパイスミックス", HazardCategory.SPICE),
        ("6년근 인삼", HazardCategory.MEDICINAL_HERB),
    ],
)
def test_classify_by_raw_query_keywords(raw_query, expected):
    canonical = raw_query.strip().lower()
    assert classify(canonical, None, raw_query) == expected


def test_general_provider_category_falls_through_to_raw_query():
    assert classify("냉동 생선", "General", "냉동 생선") == HazardCategory.SEAFOOD


@pytest.mark.parametrize(
    "args",
    [
        ("unknownxyz",),
        ("",),
        (None,),
        (None, None, None),
        ("???", "", ""),
        ("ℵ∆", "Miscellaneous", "ℵ∆"),
    ],
)
def test_classify_is_total_with_produce_default(args):
    assert classify(*args) == DEFAULT_CATEGORY == HazardCategory.PRODUCE


def test_every_dictionary_term_has_a_keyword_category():
    keywords = set().union(*(terms for _, terms in classifier_module.CATEGORY_KEYWORDS))

    assert set(QUERY_TERMS.values()) <= keywords


@pytest.mark.parametrize("category", list(HazardCategory))
def test_hazards_for_every_category_has_three_non_empty_lists(category):
    profile = hazards_for(category)

    assert profile.category == category
    assert profile.microbial
    assert profile.chemical
    assert profile.physical
    assert profile.sources == ["CODEX Alimentarius", "FAO/WHO", "NACMCF"]


def test_hazards_for_missing_table_entry_uses_placeholder(monkeypatch):
    monkeypatch.setattr(classifier_module, "MICROBIAL_HAZARDS", {})
    monkeypatch.setattr(classifier_module, "PHYSICAL_HAZARDS", {})

    profile = hazards_for(HazardCategory.SEAFOOD)

    assert [entry.name for entry in profile.microbial] == ["일반 위해요소"]
    assert [entry.name for entry in profile.physical] == ["일반 위해요소"]
    assert profile.chemical[0].name == "메틸수은"


def test_hazard_entry_serializes_with_frontend_keys():
    payload = hazards_for(HazardCategory.LIVESTOCK).model_dump(mode="json", by_alias=True)

    first = payload["microbial"][0]
    assert payload["category"] == "축산물"
    assert set(first) == {"name", "risk", "probability", "control"}
    assert first["risk"] in {"높음", "중간", "낮음"}
