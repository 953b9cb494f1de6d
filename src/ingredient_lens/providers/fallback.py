"""Demo nutrition data used when FoodData Central is unavailable or empty."""

from __future__ import annotations

import random
from types import MappingProxyType

from ingredient_lens.schema import ProviderNutrient, ProviderNutritionRecord

SIMULATED_FDC_ID = 999999

NUTRIENT_UNITS = MappingProxyType({
    "Protein": "g",
    "Total lipid (fat)": "g",
    "Carbohydrate, by difference": "g",
    "Energy": "kcal",
    "Sugars, total including NLEA": "g",
    "Sodium, Na": "mg",
    "Cholesterol": "mg",
    "Fatty acids, total saturated": "g",
    "Fatty acids, total trans": "g",
})

# name -> (low, high, decimals)
SIMULATED_RANGES = MappingProxyType({
    "Protein": (0.5, 20.0, 1),
    "Total lipid (fat)": (0.1, 15.0, 1),
    "Carbohydrate, by difference": (5.0, 30.0, 1),
    "Energy": (20.0, 250.0, 1),
    "Sugars, total including NLEA": (0.0, 15.0, 1),
    "Sodium, Na": (5.0, 300.0, 1),
    "Cholesterol": (0.0, 100.0, 1),
    "Fatty acids, total saturated": (0.1, 10.0, 2),
    "Fatty acids, total trans": (0.0, 1.0, 2),
})

# Values listed in NUTRIENT_UNITS order.
_KNOWN_FOODS = {
    "apple": (171688, "Apples, raw, with skin", "Fruits",
              (0.26, 0.17, 13.8, 52.0, 10.4, 1.0, 0.0, 0.03, 0.0)),
    "beef": (170567, "Beef, raw", "Meat",
             (26.1, 11.8, 0.0, 250.0, 0.0, 72.0, 90.0, 4.6, 0.4)),
    "strawberry": (167762, "Strawberries, raw", "Fruits",
                   (0.67, 0.3, 7.6, 32.0, 4.89, 1.0, 0.0, 0.01, 0.0)),
    "pork": (167812, "Pork, fresh, raw", "Meat",
             (20.9, 14.3, 0.0, 212.0, 0.0, 62.0, 71.0, 5.3, 0.1)),
    "pepper": (170931, "Spices, pepper, black", "Spices and Herbs",
               (10.4, 3.3, 64.0, 251.0, 0.6, 20.0, 0.0, 1.4, 0.0)),
    "aspartame": (999123, "Aspartame (Sweetener)", "Food Additives",
                  (0.0, 0.0, 85.0, 365.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
}

KNOWN_FALLBACK_TERMS = tuple(_KNOWN_FOODS)


def _nutrients(values) -> list[ProviderNutrient]:
    return [
        ProviderNutrient(name=name, value=value, unit=unit)
        for (name, unit), value in zip(NUTRIENT_UNITS.items(), values)
    ]


def generate_fallback(query: str, rng: random.Random | None = None) -> ProviderNutritionRecord:
    """Return demo nutrition data for an English search term.

    Six known terms get fixed reference values. Anything else gets a
    simulated record with random values inside SIMULATED_RANGES.
    """
    key = query.lower()
    known = _KNOWN_FOODS.get(key)
    if known is not None:
        fdc_id, description, category, values = known
        return ProviderNutritionRecord(
            fdc_id=fdc_id,
            description=description,
            food_category=category,
            nutrients=_nutrients(values),
            simulated=True,
        )

    rng = rng or random.Random()
    values = [
        round(rng.uniform(low, high), decimals)
        for low, high, decimals in SIMULATED_RANGES.values()
    ]
    return ProviderNutritionRecord(
        fdc_id=SIMULATED_FDC_ID,
        description=f"{query.capitalize()} (Simulated Data)",
        food_category="General",
        nutrients=_nutrients(values),
        simulated=True,
    )
