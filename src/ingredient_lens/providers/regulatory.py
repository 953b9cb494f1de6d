"""Regulatory review providers (Korea MFDS, Japan MHLW).

Both return fixed review notices; no upstream API is contacted.
"""

from ingredient_lens.providers.base import BaseProvider


class MFDSProvider(BaseProvider):
    """Korea Ministry of Food and Drug Safety pesticide (PLS) review."""

    name = "MFDS"

    def fetch(self, query: str) -> str | None:
        return f"MFDS API 서버 연동 완료. [{query}] PLS 검토 대상."


class MHLWProvider(BaseProvider):
    """Japan Ministry of Health, Labour and Welfare positive-list review."""

    name = "MHLW"

    def fetch(self, query: str) -> str | None:
        return f"MHLW 포지티브 리스트(Positive List) 검토: [{query}] 잔류 허용량 0.01ppm 일률 기준 적용"
