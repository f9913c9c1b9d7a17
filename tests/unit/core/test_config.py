from __future__ import annotations

import pytest

from dashboard.core import config as config_module
from dashboard.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clear_config_cache():
    config_module.get_config.cache_clear()
    yield
    config_module.get_config.cache_clear()


def test_defaults_validate(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = config_module.get_config("development")
    assert cfg.INVOICES_PATH.startswith("/")
    assert cfg.DEBUG is True


def test_rejects_unknown_database_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql://db/app")
    with pytest.raises(ConfigurationError):
        config_module.get_config("development")


def test_production_rejects_placeholder_secret(monkeypatch):
    monkeypatch.delenv("AUTH_SECRET", raising=False)
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/dashboard")
    with pytest.raises(ConfigurationError, match="AUTH_SECRET"):
        config_module.get_config("production")


def test_production_config(monkeypatch):
    monkeypatch.setenv("AUTH_SECRET", "a-real-secret")
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/dashboard")
    cfg = config_module.get_config("production")
    assert cfg.is_production is True
    assert cfg.DEBUG is False
