"""Shared pytest fixtures for grinvoice tests."""

from __future__ import annotations

import pytest

from grinvoice.runtime.settings import reset_settings

_ENV_VARS = (
    "GRINVOICE_CONFIG",
    "GRINVOICE_VISION_URL",
    "GRINVOICE_VISION_API_KEY",
    "GRINVOICE_OCR_JSON_DIR",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep settings independent of the developer's environment and working directory."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
