"""Centralized path management for mobtimer.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/mobtimer (default: ~/.config/mobtimer)
- State: $XDG_STATE_HOME/mobtimer (default: ~/.local/state/mobtimer)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class MobPaths:
    """Centralized path management following XDG spec."""

    workspace: Path  # Current working directory

    _config_home: Path = field(default_factory=_xdg_config_home)
    _state_home: Path = field(default_factory=_xdg_state_home)

    # === WORKSPACE PATHS ===

    @property
    def workspace_config(self) -> Path:
        """Workspace .mobtimer/ directory."""
        return self.workspace / ".mobtimer"

    @property
    def debug_log(self) -> Path:
        """Debug log: .mobtimer/debug.log"""
        return self.workspace_config / "debug.log"

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/mobtimer/"""
        return self._config_home / "mobtimer"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/mobtimer/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/mobtimer/"""
        return self._state_home / "mobtimer"

    def ensure_global_dirs(self) -> None:
        """Create global XDG directories."""
        self.global_config_dir.mkdir(parents=True, exist_ok=True)
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: MobPaths | None = None


def get_paths(workspace: Path | None = None) -> MobPaths:
    """Get the paths singleton.

    On first call, optionally set the workspace directory.
    Subsequent calls return the same instance.

    Args:
        workspace: The workspace directory. If not provided on first call,
                   defaults to current working directory.

    Returns:
        The MobPaths singleton instance.
    """
    global _paths
    if _paths is None:
        _paths = MobPaths(workspace=workspace or Path.cwd())
    return _paths


def reset_paths() -> None:
    """Reset the paths singleton (for testing)."""
    global _paths
    _paths = None
