"""ingredient-lens: Aggregate nutrition, regulatory and hazard data for an ingredient."""

from ingredient_lens.core import IngredientService, MultipleResults, SingleResult, fetch_all, normalize
from ingredient_lens.schema import HazardCategory, NormalizedResult, ProviderNutritionRecord

__version__ = "0.1.0"

__all__ = [
    "fetch_all",
    "normalize",
    "IngredientService",
    "HazardCategory",
    "MultipleResults",
    "NormalizedResult",
    "ProviderNutritionRecord",
    "SingleResult",
    "__version__",
]
