"""Shared fixtures for the dice test suite."""

from __future__ import annotations

import pytest

DICE_ENV_VARS = ["DICE_NUMBER", "PRESS_COUNT", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove dice env vars so tests start clean and .env loads don't leak."""
    for key in DICE_ENV_VARS:
        # setenv first so teardown restores the original (possibly absent) value
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)
