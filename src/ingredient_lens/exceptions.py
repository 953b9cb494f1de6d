"""Custom exceptions for ingredient-lens."""


class IngredientLensError(Exception):
    """Base exception for ingredient-lens."""

    pass


class EmptyQueryError(IngredientLensError):
    """Raised when the search query is empty or whitespace only."""

    pass


class ProviderError(IngredientLensError):
    """Raised when a data provider cannot produce a usable response."""

    def __init__(self, error_code: str, message: str):
        self.error_code = error_code
        self.message = message
        super().__init__(f"{error_code}: {message}")
