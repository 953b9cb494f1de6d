"""Tests for term translation."""

import pytest

from ingredient_lens.translation import INTERNAL_ENGINE_NOTICE, DictionaryRepository, TermMapper
from ingredient_lens.translation.data.v1 import DISPLAY_TERMS, QUERY_TERMS


@pytest.fixture
def mapper():
    return TermMapper()


def test_every_dictionary_key_maps_to_its_value(mapper):
    for key, value in QUERY_TERMS.items():
        assert mapper.to_canonical(key) == value


def test_query_dictionary_covers_korean_and_japanese(mapper):
    assert mapper.to_canonical("사과") == "apple"
    assert mapper.to_canonical("りんご") == "apple"
    assert mapper.to_canonical("リンゴ") == "apple"
    assert mapper.to_canonical("박력분") == "cake flour"
    assert len(QUERY_TERMS) >= 150


def test_to_canonical_trims_and_lowercases_before_lookup(mapper):
    assert mapper.to_canonical("  사과 \n") == "apple"
    assert mapper.to_canonical("MSG") == "monosodium glutamate"


@pytest.mark.parametrize("raw", ["Apple", "  Chicken Breast ", "unknownxyz", "ÉCLAIR", ""])
def test_unknown_terms_pass_through_normalized(mapper, raw):
    assert mapper.to_canonical(raw) == raw.strip().lower()


def test_to_canonical_accepts_none(mapper):
    assert mapper.to_canonical(None) == ""


def test_to_localized_translates_nutrient_names(mapper):
    assert mapper.to_localized("Protein", "en") == "단백질"
    assert mapper.to_localized("Sodium, Na", "en") == "나트륨"
    assert mapper.to_localized("Fatty acids, total trans", "en") == "트랜스지방"


def test_to_localized_is_case_insensitive_and_replaces_all_occurrences(mapper):
    assert mapper.to_localized("apple and APPLE", "en") == "사과 and 사과"


def test_to_localized_description_keeps_untranslated_words(mapper):
    assert mapper.to_localized("Apples, raw, with skin", "en") == "사과s, 생물(Raw), with skin"


def test_longer_key_listed_first_translates_whole_phrase(mapper):
    assert mapper.to_localized("Fruits and Fruit Juices", "en") == "과일 및 과일주스류"


def test_shorter_key_listed_first_leaves_partial_phrase(mapper):
    # "Pork" precedes "Pork Products" in the display dictionary.
    assert mapper.to_localized("Pork Products", "en") == "돼지고기 Products"
    assert mapper.to_localized("Beef Products", "en") == "소고기 Products"
    assert mapper.to_localized("Unenriched", "en") == "Un영양 강화"


def test_display_rules_keep_dictionary_order():
    repo = DictionaryRepository()

    assert [rule.source for rule in repo.display_rules] == [source for source, _ in DISPLAY_TERMS]


def test_japanese_source_without_match_gets_engine_notice(mapper):
    text = "MHLW 포지티브 리스트(Positive List) 검토: [사과] 잔류 허용량 0.01ppm 일률 기준 적용"

    assert mapper.to_localized(text, "ja") == text + INTERNAL_ENGINE_NOTICE


def test_japanese_source_with_match_has_no_notice(mapper):
    assert mapper.to_localized("検査: Pepper", "ja") == "検査: 후추"


def test_english_source_without_match_is_unchanged(mapper):
    assert mapper.to_localized("Mystery food", "en") == "Mystery food"


@pytest.mark.parametrize("text", [None, ""])
def test_to_localized_returns_empty_input_unchanged(mapper, text):
    assert mapper.to_localized(text, "ja") == text


def test_unknown_dictionary_version_raises():
    with pytest.raises(ValueError):
        TermMapper(dictionary_version="v99")
