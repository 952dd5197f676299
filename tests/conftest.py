"""Root conftest — shared test configuration."""

import pytest

from whatwg_infra.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Drop host WHATWG_INFRA_* variables and the cached Settings around each test."""
    monkeypatch.delenv("WHATWG_INFRA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WHATWG_INFRA_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
