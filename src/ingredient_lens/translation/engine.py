"""Dictionary-based term translation."""

from __future__ import annotations

import logging
from functools import lru_cache

from ingredient_lens.translation.repository import DictionaryRepository

logger = logging.getLogger(__name__)

INTERNAL_ENGINE_NOTICE = " (본 텍스트는 내부 엔진을 거쳐 한국어로 통역되었습니다.)"


class TermMapper:
    """Maps user queries to English search terms and provider text to Korean."""

    def __init__(self, dictionary_version: str = "v1"):
        self.repo = DictionaryRepository(version=dictionary_version)

    def to_canonical(self, query: str | None) -> str:
        """Return the English search term for a Korean/Japanese/English query.

        Unknown terms pass through stripped and lowercased.
        """
        key = (query or "").strip().lower()
        canonical = self.repo.query_terms.get(key)
        if canonical is None:
            logger.debug("query term not in dictionary: %s", key)
            return key
        return canonical

    def to_localized(self, text: str | None, source_lang: str | None = "en") -> str | None:
        """Render provider text in Korean.

        Every display rule is applied in dictionary order over the running
        text. Japanese-sourced text that no rule touched gets the internal
        engine notice appended.
        """
        if not text:
            return text

        translated = text
        for rule in self.repo.display_rules:
            translated = rule.pattern.sub(lambda _match, target=rule.target: target, translated)

        if translated == text and source_lang == "ja":
            return f"{text}{INTERNAL_ENGINE_NOTICE}"
        return translated


@lru_cache(maxsize=4)
def get_term_mapper(dictionary_version: str = "v1") -> TermMapper:
    return TermMapper(dictionary_version=dictionary_version)
