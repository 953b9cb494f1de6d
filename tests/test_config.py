"""Tests for environment configuration."""

from ingredient_lens.config import ServiceConfig


def test_defaults_without_environment(monkeypatch):
    for name in ("USDA_API_KEY", "USDA_TIMEOUT_SEC", "DICTIONARY_VERSION", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    config = ServiceConfig.from_env()

    assert config.usda_api_key == "DEMO_KEY"
    assert config.usda_timeout_sec == 5.0
    assert config.dictionary_version == "v1"
    assert config.allowed_origins == ("*",)


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("USDA_API_KEY", " real-key ")
    monkeypatch.setenv("USDA_TIMEOUT_SEC", "2.5")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    config = ServiceConfig.from_env()

    assert config.usda_api_key == "real-key"
    assert config.usda_timeout_sec == 2.5
    assert config.allowed_origins == ("https://a.example", "https://b.example")


def test_invalid_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("USDA_TIMEOUT_SEC", "soon")
    assert ServiceConfig.from_env().usda_timeout_sec == 5.0

    monkeypatch.setenv("USDA_TIMEOUT_SEC", "-1")
    assert ServiceConfig.from_env().usda_timeout_sec == 5.0
