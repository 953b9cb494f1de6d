"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from ingredient_lens.schema import HazardEntry, NormalizedResult, ProviderNutrient, ProviderNutritionRecord


def test_provider_record_reads_fdc_field_names():
    record = ProviderNutritionRecord.model_validate(
        {
            "fdcId": 171688,
            "description": "Apples, raw, with skin",
            "foodCategory": "Fruits",
            "foodNutrients": [{"nutrientName": "Protein", "value": 0.26, "unitName": "g"}],
        }
    )

    assert record.fdc_id == 171688
    assert record.food_category == "Fruits"
    assert record.nutrients == [ProviderNutrient(name="Protein", value=0.26, unit="g")]
    assert record.simulated is False


def test_provider_record_all_defaults():
    record = ProviderNutritionRecord()

    assert record.fdc_id is None
    assert record.description == ""
    assert record.food_category is None
    assert record.nutrients == []


def test_provider_record_null_description_becomes_empty():
    record = ProviderNutritionRecord.model_validate({"description": None})

    assert record.description == ""


def test_provider_record_is_immutable():
    record = ProviderNutritionRecord(description="Apple")

    with pytest.raises(ValidationError):
        record.description = "Pear"


def test_hazard_entry_rejects_unknown_risk_level():
    with pytest.raises(ValidationError):
        HazardEntry(name="x", risk="critical", probability="낮음", control="y")


def test_hazard_entry_accepts_field_names_and_aliases():
    by_alias = HazardEntry(name="x", risk="높음", probability="낮음", control="y")
    by_name = HazardEntry(name="x", risk_level="높음", likelihood="낮음", control_measure="y")

    assert by_alias == by_name


def test_normalized_result_hazards_optional():
    result = NormalizedResult(
        name="X",
        description="X",
        fdcId="N/A",
        insight="",
        origin="",
        compliance={"MFDS": "a", "USDA": "b", "MHLW": "c"},
        handling=[],
    )

    payload = result.to_payload()
    assert payload["hazards"] is None
    assert payload["chartData"] == []
    assert payload["dataSource"] == "USDA"


def test_provider_nutrient_null_name_and_unit_become_empty():
    nutrient = ProviderNutrient.model_validate({"nutrientName": None, "value": 2, "unitName": None})

    assert nutrient.name == ""
    assert nutrient.unit == ""
    assert nutrient.value == 2
