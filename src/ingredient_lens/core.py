"""Ingredient search pipeline.

Translates the query, gathers provider data, classifies hazards and builds
the dashboard payload. Provider failures degrade to simulated data rather
than errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ingredient_lens.config import ServiceConfig
from ingredient_lens.exceptions import EmptyQueryError
from ingredient_lens.hazards import classify, hazards_for
from ingredient_lens.providers.base import BaseProvider
from ingredient_lens.providers.regulatory import MFDSProvider, MHLWProvider
from ingredient_lens.providers.usda import USDAProvider
from ingredient_lens.schema import (
    ChartPoint,
    Compliance,
    NormalizedResult,
    ProviderNutritionRecord,
)
from ingredient_lens.translation import TermMapper, get_term_mapper

logger = logging.getLogger(__name__)

MAX_NUTRIENTS = 9
ORIGIN_NOTICE = "📌 원산지 데이터 매핑: 🇺🇸미국(USDA) / 🇰🇷한국(MFDS) / 🇯🇵일본(MHLW) 교차검증 완료"


@dataclass(frozen=True)
class SingleResult:
    """Unambiguous match; serialized as a bare JSON object."""

    result: NormalizedResult

    @property
    def results(self) -> list[NormalizedResult]:
        return [self.result]

    def to_payload(self) -> dict:
        return self.result.to_payload()


@dataclass(frozen=True)
class MultipleResults:
    """Ambiguous match; serialized as a JSON array for the caller to choose from."""

    results: list[NormalizedResult]

    def to_payload(self) -> list[dict]:
        return [item.to_payload() for item in self.results]


SearchOutcome = SingleResult | MultipleResults


class IngredientService:
    """Runs one ingredient search across all providers."""

    def __init__(
        self,
        config: ServiceConfig | None = None,
        *,
        usda: BaseProvider | None = None,
        mfds: BaseProvider | None = None,
        mhlw: BaseProvider | None = None,
        term_mapper: TermMapper | None = None,
    ):
        self.config = config or ServiceConfig.from_env()
        self.usda = usda or USDAProvider(
            api_key=self.config.usda_api_key,
            timeout_sec=self.config.usda_timeout_sec,
        )
        self.mfds = mfds or MFDSProvider()
        self.mhlw = mhlw or MHLWProvider()
        self.term_mapper = term_mapper or get_term_mapper(self.config.dictionary_version)

    def fetch_all(self, raw_query: str) -> SearchOutcome:
        """Search all providers and normalize the results.

        Raises:
            EmptyQueryError: If the query is empty or whitespace only.
        """
        if not raw_query or not raw_query.strip():
            raise EmptyQueryError("검색어를 입력해주세요.")
        raw_query = raw_query.strip()

        canonical = self.term_mapper.to_canonical(raw_query)
        records = _dedupe_records(self.usda.fetch(canonical))
        mfds = self.mfds.fetch(raw_query)
        mhlw = self.mhlw.fetch(raw_query)
        logger.info(
            "ingredient search query=%s canonical=%s records=%d simulated=%s",
            raw_query, canonical, len(records), any(r.simulated for r in records),
        )

        if len(records) > 1:
            return MultipleResults(
                [normalize(raw_query, canonical, record, mfds, mhlw, self.term_mapper) for record in records]
            )
        single = records[0] if records else None
        return SingleResult(normalize(raw_query, canonical, single, mfds, mhlw, self.term_mapper))


def fetch_all(raw_query: str, *, config: ServiceConfig | None = None) -> SearchOutcome:
    """Search an ingredient with providers built from config (or the environment)."""
    return IngredientService(config=config).fetch_all(raw_query)


def normalize(
    raw_query: str,
    canonical: str,
    record: ProviderNutritionRecord | None,
    mfds: str | None,
    mhlw: str | None,
    term_mapper: TermMapper | None = None,
) -> NormalizedResult:
    """Build the dashboard payload for one provider record."""
    mapper = term_mapper or get_term_mapper()

    insight = f"'{raw_query}'(영문 매칭: {canonical})에 대한 분석 데이터가 없습니다."
    usda_text = "검색 결과 없음"
    handling = ["데이터 부족"]
    chart_data: list[ChartPoint] = []
    fdc_id: int | str = "N/A"
    description = raw_query.upper()
    provider_category = None

    if record is not None:
        translated_desc = mapper.to_localized(record.description, "en")
        translated_category = mapper.to_localized(record.food_category or "", "en")
        fdc_id = record.fdc_id if record.fdc_id not in (None, "") else "N/A"
        description = translated_desc

        insight = f"해당 식재료({translated_desc})는 측정된 영양성분이 존재합니다. 미국 USDA FDC ID: {fdc_id}."
        usda_text = f"[분류: {translated_category}] 규격 확인 및 성분 검사 완료."

        nutrients = record.nutrients[:MAX_NUTRIENTS]
        labels = [mapper.to_localized(n.name, "en") for n in nutrients]
        handling = [
            f"{label}: {_format_value(n.value)} {n.unit}"
            for label, n in zip(labels, nutrients)
        ]
        chart_data = [
            ChartPoint(label=label, value=float(n.value or 0.0))
            for label, n in zip(labels, nutrients)
        ]
        if not record.simulated:
            provider_category = record.food_category

    mhlw_text = mapper.to_localized(mhlw, "ja") if mhlw else "MHLW 응답 데이터 없음"
    category = classify(canonical, provider_category, raw_query)

    return NormalizedResult(
        name=raw_query.upper(),
        description=description,
        fdcId=fdc_id,
        insight=insight,
        origin=ORIGIN_NOTICE,
        compliance=Compliance(
            MFDS=mfds or "MFDS 응답 없음",
            USDA=usda_text,
            MHLW=mhlw_text,
        ),
        handling=handling or ["영양 성분 데이터 확보 필요"],
        chartData=chart_data,
        hazards=hazards_for(category),
        dataSource="SIMULATED" if record is None or record.simulated else "USDA",
    )


def _format_value(value: int | float | None) -> str:
    return "" if value is None else str(value)


def _dedupe_records(records: list[ProviderNutritionRecord]) -> list[ProviderNutritionRecord]:
    deduped: list[ProviderNutritionRecord] = []
    seen: set[str] = set()
    for record in records:
        if record.fdc_id is not None:
            key = str(record.fdc_id)
            if key in seen:
                continue
            seen.add(key)
        deduped.append(record)
    return deduped
