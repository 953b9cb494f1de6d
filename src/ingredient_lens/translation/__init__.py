"""Term translation utilities for ingredient-lens."""

from ingredient_lens.translation.engine import INTERNAL_ENGINE_NOTICE, TermMapper, get_term_mapper
from ingredient_lens.translation.repository import DictionaryRepository

__all__ = [
    "DictionaryRepository",
    "INTERNAL_ENGINE_NOTICE",
    "TermMapper",
    "get_term_mapper",
]
