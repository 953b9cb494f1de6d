"""Translation dictionary v1."""

from ingredient_lens.translation.data.v1.display_terms import DISPLAY_TERMS
from ingredient_lens.translation.data.v1.query_terms import QUERY_TERMS

__all__ = ["QUERY_TERMS", "DISPLAY_TERMS"]
