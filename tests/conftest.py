"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.2.0 - 2026-10-16 - Isolate settings from the developer's environment and data directory.
  v0.1.0 - 2026-10-12 - Force Qt offscreen platform for headless test runs.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

_SETTINGS_ENV_VARS = (
    "STICKY_PROMPTS_CONFIG_JSON",
    "STICKY_PROMPTS_DATA_DIR",
    "STICKY_PROMPTS_STORAGE_FILENAME",
    "STICKY_PROMPTS_SEED_PATH",
)


def pytest_configure(config: Any) -> None:
    """Ensure Qt uses the offscreen platform during tests to avoid GUI aborts."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop Sticky Prompts variables inherited from the developer shell."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
