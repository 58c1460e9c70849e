"""Configuration and settings persistence."""

import json
import logging
from pathlib import Path
from typing import Any

from mobtimer.config.paths import get_paths

logger = logging.getLogger(__name__)

DEFAULT_TIMER_MINUTES = 10


def get_config_dir() -> Path:
    """Get the mobtimer config directory, creating if needed.

    Returns XDG-compliant path: ~/.config/mobtimer/
    """
    config_dir = get_paths().global_config_dir
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for mob sessions."""

    _defaults: dict[str, Any] = {
        "remote_name": "origin",
        "base_branch": "master",
        "wip_branch": "mob-session",
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                self._data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                self._data = {}
        else:
            self._data = {}
        if not isinstance(self._data, dict):
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    # --- Git Settings ---

    @property
    def remote_name(self) -> str:
        """Name of the git remote shared by the mob."""
        return str(self.get("remote_name") or "").strip()

    @remote_name.setter
    def remote_name(self, value: str) -> None:
        self.set("remote_name", value.strip())

    @property
    def base_branch(self) -> str:
        """Branch the WIP branch is created from."""
        return str(self.get("base_branch") or "").strip()

    @base_branch.setter
    def base_branch(self, value: str) -> None:
        self.set("base_branch", value.strip())

    @property
    def wip_branch(self) -> str:
        """Branch the mob hands work over on."""
        return str(self.get("wip_branch") or "").strip()

    @wip_branch.setter
    def wip_branch(self, value: str) -> None:
        self.set("wip_branch", value.strip())

    # --- Timer Settings ---

    def _get_timer_settings(self) -> dict[str, Any]:
        raw = self._data.get("timer", {})
        if isinstance(raw, dict):
            return raw
        return {}

    def _set_timer_settings(self, timer: dict[str, Any]) -> None:
        self.set("timer", timer)

    @property
    def timer_minutes(self) -> int:
        """Default timer duration in minutes.

        Invalid or non-positive stored values fall back to the default.
        """
        raw = self._get_timer_settings().get("minutes", DEFAULT_TIMER_MINUTES)
        try:
            minutes = int(raw)
        except (TypeError, ValueError):
            return DEFAULT_TIMER_MINUTES
        if minutes <= 0:
            return DEFAULT_TIMER_MINUTES
        return minutes

    @timer_minutes.setter
    def timer_minutes(self, value: int) -> None:
        timer = self._get_timer_settings()
        timer["minutes"] = int(value)
        self._set_timer_settings(timer)

    @property
    def timer_sound(self) -> bool:
        """Whether a sound is played when the timer runs out.

        Anything other than a JSON boolean falls back to False.
        """
        value = self._get_timer_settings().get("sound", False)
        return value if isinstance(value, bool) else False

    @timer_sound.setter
    def timer_sound(self, value: bool) -> None:
        timer = self._get_timer_settings()
        timer["sound"] = bool(value)
        self._set_timer_settings(timer)

    @property
    def start_with_share(self) -> bool:
        """Whether screen sharing starts together with the session."""
        value = self._data.get("start_with_share", False)
        return value if isinstance(value, bool) else False

    @start_with_share.setter
    def start_with_share(self, value: bool) -> None:
        self.set("start_with_share", bool(value))

    # --- Preconditions ---

    def validate_for_start(self) -> tuple[bool, str | None]:
        """Check whether a mob session can be started with these settings.

        Returns:
            ``(True, None)`` when valid, otherwise ``(False, reason)``.
        """
        if not self.remote_name:
            return False, "Remote name is not set"
        if not self.base_branch:
            return False, "Base branch is not set"
        if not self.wip_branch:
            return False, "WIP branch is not set"
        if self.wip_branch == self.base_branch:
            return False, (
                f"WIP branch must differ from base branch ({self.base_branch})"
            )
        return True, None


# Global settings instance
settings = Settings()
