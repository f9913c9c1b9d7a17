from __future__ import annotations

import pytest

import dashboard.core.startup as startup_module


class _Cfg:
    ENV = "development"

    @property
    def is_production(self) -> bool:
        return False


def test_startup_passes_when_database_reachable(monkeypatch):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: True)
    monkeypatch.setattr(startup_module, "get_active_database_url", lambda: "sqlite:///./dashboard.db")

    startup_module.validate_startup_config()


def test_startup_raises_when_database_unreachable(monkeypatch):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: False)

    with pytest.raises(RuntimeError, match="Database connectivity check failed"):
        startup_module.validate_startup_config()
