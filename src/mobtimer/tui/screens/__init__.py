"""TUI screens for starting a mob session."""
from __future__ import annotations

from .settings import SettingsModal
from .start_dialog import StartDialog

__all__ = [
    "SettingsModal",
    "StartDialog",
]
