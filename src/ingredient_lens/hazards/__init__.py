"""Hazard analysis for ingredient-lens."""

from ingredient_lens.hazards.classifier import DEFAULT_CATEGORY, classify, hazards_for

__all__ = ["DEFAULT_CATEGORY", "classify", "hazards_for"]
