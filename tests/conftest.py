from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path

import pytest

from mobtimer.config.paths import reset_paths
from mobtimer.config.settings import Settings, settings


@pytest.fixture(autouse=True)
def isolate_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    monkeypatch.setattr(settings, "_save", _noop_save)
    try:
        yield
    finally:
        settings._data = original_data
        reset_paths()


@pytest.fixture
def fresh_settings() -> Settings:
    """Settings backed by an empty file under the temporary config home."""
    return Settings()
