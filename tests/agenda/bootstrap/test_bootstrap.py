"""Testes do bootstrap (validação de settings e wiring do backend)."""

from __future__ import annotations

import logging

import pytest

from agenda.bootstrap import (
    create_agenda_backend,
    initialize_test_app,
    validate_runtime_settings,
)
from agenda.infra import HttpAgendaBackend
from config.settings import get_agenda_settings, get_base_settings


@pytest.fixture(autouse=True)
def _clear_caches():
    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()


def test_production_without_token_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("AGENDA_BACKEND_TOKEN", raising=False)

    with pytest.raises(RuntimeError, match="AGENDA_BACKEND_TOKEN"):
        validate_runtime_settings()


def test_development_only_reports_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("AGENDA_BACKEND_TOKEN", raising=False)
    monkeypatch.delenv("AGENDA_BACKEND_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    errors = validate_runtime_settings()

    assert errors == ["agenda: AGENDA_BACKEND_TOKEN não configurado"]


def test_valid_settings_return_no_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("AGENDA_BACKEND_TOKEN", "token-1")
    monkeypatch.delenv("AGENDA_BACKEND_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert validate_runtime_settings() == []


def test_create_agenda_backend_uses_http_client() -> None:
    assert isinstance(create_agenda_backend(), HttpAgendaBackend)


def test_initialize_test_app_sets_debug() -> None:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        initialize_test_app()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = handlers
        root.setLevel(level)
