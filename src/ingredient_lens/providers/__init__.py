"""Providers for ingredient-lens."""

from ingredient_lens.providers.base import BaseProvider, LookupResult
from ingredient_lens.providers.fallback import generate_fallback
from ingredient_lens.providers.regulatory import MFDSProvider, MHLWProvider
from ingredient_lens.providers.usda import USDAProvider

__all__ = [
    "BaseProvider",
    "LookupResult",
    "MFDSProvider",
    "MHLWProvider",
    "USDAProvider",
    "generate_fallback",
]
