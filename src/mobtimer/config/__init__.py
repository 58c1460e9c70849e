"""Configuration management for mobtimer."""
from __future__ import annotations

from mobtimer.config.paths import MobPaths, get_paths, reset_paths
from mobtimer.config.settings import Settings, get_settings_path, settings

__all__ = [
    "MobPaths",
    "Settings",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
