"""USDA FoodData Central provider.

Search: GET https://api.nal.usda.gov/fdc/v1/foods/search?query=...&api_key=KEY&pageSize=5
"""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from ingredient_lens.config import DEFAULT_USDA_API_KEY, DEFAULT_USDA_TIMEOUT_SEC
from ingredient_lens.exceptions import ProviderError
from ingredient_lens.providers.base import BaseProvider, LookupResult
from ingredient_lens.providers.fallback import generate_fallback
from ingredient_lens.schema import ProviderNutritionRecord

logger = logging.getLogger(__name__)

USDA_SEARCH_URL = "https://api.nal.usda.gov/fdc/v1/foods/search"
PAGE_SIZE = 5


class USDAProvider(BaseProvider):
    """FoodData Central search with fail-open fallback data."""

    name = "USDA"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout_sec: float = DEFAULT_USDA_TIMEOUT_SEC,
        page_size: int = PAGE_SIZE,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key or DEFAULT_USDA_API_KEY
        self.timeout_sec = timeout_sec
        self.page_size = page_size
        self.session = session or requests.Session()

    def search(self, query: str) -> LookupResult:
        """Query FDC and report the outcome without raising."""
        try:
            payload = self._request(query)
            foods = payload.get("foods") or []
            if not isinstance(foods, list):
                raise ProviderError("PARSE_ERROR", "foods is not a list")
            if not foods:
                raise ProviderError("NO_RESULTS", f"No foods found for '{query}'")
            records = [ProviderNutritionRecord.model_validate(food) for food in foods[: self.page_size]]
        except ProviderError as exc:
            return self._failure(query, exc.error_code, exc.message)
        except ValidationError as exc:
            return self._failure(query, "PARSE_ERROR", f"Unexpected food schema: {exc.error_count()} errors")
        return LookupResult.success(records)

    def fetch(self, query: str) -> list[ProviderNutritionRecord]:
        """Return FDC records, or a single fallback record when the lookup fails."""
        result = self.search(query)
        if result.ok:
            return result.records
        logger.info("USDA fallback data substituted query=%s reason=%s", query, result.error_code)
        return [generate_fallback(query)]

    def _request(self, query: str) -> dict:
        params = {"query": query, "api_key": self.api_key, "pageSize": self.page_size}
        try:
            response = self.session.get(USDA_SEARCH_URL, params=params, timeout=self.timeout_sec)
        except requests.Timeout as exc:
            raise ProviderError("TIMEOUT", f"Request timed out after {self.timeout_sec}s: {exc}") from exc
        except requests.RequestException as exc:
            raise ProviderError("REQUEST_FAILED", f"{type(exc).__name__}: {exc}") from exc

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise ProviderError("HTTP_ERROR", str(exc)) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("PARSE_ERROR", f"Invalid JSON response: {exc}") from exc
        if not isinstance(data, dict):
            raise ProviderError("PARSE_ERROR", "Response body is not a JSON object")
        return data

    @staticmethod
    def _failure(query: str, error_code: str, message: str) -> LookupResult:
        logger.warning("USDA lookup failed query=%s error_code=%s error=%s", query, error_code, message)
        return LookupResult.failure(error_code, message)
