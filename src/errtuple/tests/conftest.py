"""Shared fixtures: every test starts without an observer and with fresh settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from errtuple import clear_error_observer, clear_settings_cache


@pytest.fixture(autouse=True)
def _isolated_state() -> Iterator[None]:
    clear_error_observer()
    clear_settings_cache()
    yield
    clear_error_observer()
    clear_settings_cache()


@pytest.fixture
def seen() -> list:
    """Sink for observer/on_err callbacks."""
    return []
