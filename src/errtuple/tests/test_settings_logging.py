"""Tests for configuration and the logging observer."""

from __future__ import annotations

import io
import logging

import pytest

from errtuple import Err, create_err, get_settings, observing
from errtuple.foundation.config import ErrtupleSettings
from errtuple.observability import configure_logging, logging_observer


# ─────────────────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────────────────


def test_defaults() -> None:
    settings = ErrtupleSettings()
    
    assert settings.log_callback_failures is True
    assert settings.json_sort_keys is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.include_stack is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERRTUPLE_JSON_SORT_KEYS", "true")
    monkeypatch.setenv("ERRTUPLE_LOG_LEVEL", "debug")
    
    settings = get_settings()
    assert settings.json_sort_keys is True
    assert settings.logging.level == "DEBUG"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_sort_keys_applies_to_messages(monkeypatch: pytest.MonkeyPatch) -> None:
    assert Err.from_source({"b": 1, "a": 2}, "L").message == '{"b":1,"a":2}'
    
    monkeypatch.setenv("ERRTUPLE_JSON_SORT_KEYS", "true")
    from errtuple import clear_settings_cache
    clear_settings_cache()
    
    assert Err.from_source({"b": 1, "a": 2}, "L").message == '{"a":2,"b":1}'


# ─────────────────────────────────────────────────────────────────────────────
# Logging observer
# ─────────────────────────────────────────────────────────────────────────────


def test_logging_observer_logs_each_err(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="errtuple.errors")
    
    with observing(logging_observer()):
        create_err("FETCH_ERROR", ConnectionError("refused"))
        create_err("OPAQUE", object())
    
    first, second = caplog.records
    assert first.levelno == logging.WARNING
    assert first.getMessage() == "[FETCH_ERROR] refused"
    assert first.label == "FETCH_ERROR"  # type: ignore[attr-defined]
    assert first.error_name == "ConnectionError"  # type: ignore[attr-defined]
    assert first.exc_info is None
    assert second.getMessage() == "[OPAQUE] Err"


def test_logging_observer_custom_logger_and_level(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("app.errors")
    caplog.set_level(logging.DEBUG, logger="app.errors")
    
    with observing(logging_observer(log, "info")):
        create_err("NOT_FOUND")
    
    (record,) = caplog.records
    assert record.name == "app.errors"
    assert record.levelno == logging.INFO


def test_logging_observer_respects_logger_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="errtuple.errors")
    
    with observing(logging_observer(level=logging.INFO)):
        create_err("IGNORED")
    assert caplog.records == []


def test_logging_observer_includes_stack(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("ERRTUPLE_LOG_INCLUDE_STACK", "true")
    caplog.set_level(logging.WARNING, logger="errtuple.errors")
    
    try:
        raise ValueError("bad digit")
    except ValueError as e:
        source = e
    
    with observing(logging_observer()):
        create_err("PARSE_ERROR", source)
    
    (record,) = caplog.records
    assert record.exc_info is not None
    assert record.exc_info[1] is source


def test_configure_logging_is_idempotent() -> None:
    stream = io.StringIO()
    root = configure_logging("INFO", stream)
    try:
        assert configure_logging("INFO", stream) is root
        named = [h for h in root.handlers if h.get_name() == "errtuple-stream"]
        assert len(named) == 1
        assert root.level == logging.INFO
        
        with observing(logging_observer(level="INFO")):
            create_err("VISIBLE", "shown on stream")
        assert "[INFO] errtuple.errors: [VISIBLE] shown on stream" in stream.getvalue()
    finally:
        for handler in list(root.handlers):
            if handler.get_name() == "errtuple-stream":
                root.removeHandler(handler)
        root.setLevel(logging.NOTSET)
