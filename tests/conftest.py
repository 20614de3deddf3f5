"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    monkeypatch.setenv("CSP_LOG_JSON", "false")
    monkeypatch.setenv("CSP_LOG_LEVEL", "debug")
    monkeypatch.delenv("CSP_DEFAULT_PRESET", raising=False)
    monkeypatch.delenv("CSP_PRESETS_FILE", raising=False)

    # Reset cached settings and presets
    import cspheader.config.loader as loader
    import cspheader.presets as presets
    loader._settings = None
    presets.reset_presets_cache()
    yield
    loader._settings = None
    presets.reset_presets_cache()


@pytest.fixture
def presets_file(tmp_path, monkeypatch):
    """Write a presets YAML file and point CSP_PRESETS_FILE at it."""

    def _write(content: str):
        path = tmp_path / "presets.yaml"
        path.write_text(content)
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        return path

    return _write
