"""Общие фикстуры тестов."""

import pytest

from valuecodecs.core.formatting import CURRENCY_ENV_VAR, LOCALE_ENV_VAR


@pytest.fixture(autouse=True)
def clean_codec_env(monkeypatch):
    """Переопределения локали/валюты из окружения разработчика не влияют на тесты."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    monkeypatch.delenv(CURRENCY_ENV_VAR, raising=False)
