"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_USDA_API_KEY = "DEMO_KEY"
DEFAULT_USDA_TIMEOUT_SEC = 5.0


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _split_origins(value: str | None) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in (value or "*").split(",") if item.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class ServiceConfig:
    usda_api_key: str = DEFAULT_USDA_API_KEY
    usda_timeout_sec: float = DEFAULT_USDA_TIMEOUT_SEC
    dictionary_version: str = "v1"
    allowed_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls(
            usda_api_key=os.getenv("USDA_API_KEY", "").strip() or DEFAULT_USDA_API_KEY,
            usda_timeout_sec=_safe_float(os.getenv("USDA_TIMEOUT_SEC"), DEFAULT_USDA_TIMEOUT_SEC),
            dictionary_version=os.getenv("DICTIONARY_VERSION", "v1").strip() or "v1",
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS")),
        )
