"""Tests for infrastructure settings."""

import pytest

from kash_dashboard.domain.constants import SHORT_MONTH_NAMES
from kash_dashboard.infrastructure import settings as settings_module
from kash_dashboard.infrastructure.settings import KashApiSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: _Logger(),
    )
    for name in ("KASH_API_URL", "KASH_API_TIMEOUT", "KASH_MONTH_LOCALE"):
        monkeypatch.delenv(name, raising=False)


class _Logger:
    warnings: list[str] = []

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)


def test_from_env_uses_defaults() -> None:
    """Missing variables fall back to defaults."""
    settings = KashApiSettings.from_env()

    assert settings.base_url == "https://localhost:7156"
    assert settings.timeout_seconds == 10.0
    assert settings.month_locale == "pt_BR"
    assert settings.month_names == SHORT_MONTH_NAMES["pt_BR"]


def test_from_env_reads_variables(monkeypatch) -> None:
    """Environment values override the defaults."""
    monkeypatch.setenv("KASH_API_URL", " https://api.example.com/ ")
    monkeypatch.setenv("KASH_API_TIMEOUT", "2.5")
    monkeypatch.setenv("KASH_MONTH_LOCALE", "en_US")

    settings = KashApiSettings.from_env()

    assert settings.base_url == "https://api.example.com"
    assert settings.timeout_seconds == 2.5
    assert settings.month_names[1] == "Feb"


@pytest.mark.parametrize("raw_timeout", ["abc", "0", "-3"])
def test_from_env_rejects_invalid_timeout(monkeypatch, raw_timeout) -> None:
    """Invalid timeouts fall back to the default."""
    monkeypatch.setenv("KASH_API_TIMEOUT", raw_timeout)

    settings = KashApiSettings.from_env()

    assert settings.timeout_seconds == 10.0


def test_from_env_rejects_unknown_locale(monkeypatch) -> None:
    """Unknown month locales fall back to pt-BR."""
    monkeypatch.setenv("KASH_MONTH_LOCALE", "fr_FR")

    settings = KashApiSettings.from_env()

    assert settings.month_locale == "pt_BR"
