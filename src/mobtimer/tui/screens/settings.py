"""Settings modal for mob session configuration."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static, Switch

from mobtimer.config import Settings, get_settings_path
from mobtimer.config import settings as default_settings
from mobtimer.start.request import InvalidTimerMinutesError, parse_timer_minutes

logger = logging.getLogger(__name__)


class SettingsModal(ModalScreen[bool]):
    """Modal for viewing and editing mob settings.

    Dismisses with True when the settings were saved.
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=True),
    ]

    DEFAULT_CSS = """
    SettingsModal {
        align: center middle;
    }

    SettingsModal > Vertical {
        width: 70;
        max-width: 90%;
        height: auto;
        max-height: 85%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    SettingsModal .modal-title {
        text-align: center;
        text-style: bold;
        color: $text;
        padding-bottom: 1;
        border-bottom: solid $surface-lighten-1;
        margin-bottom: 1;
    }

    SettingsModal .settings-scroll {
        height: auto;
        max-height: 30;
    }

    SettingsModal .section-header {
        text-style: bold;
        color: $primary;
        padding: 1 0 0 0;
    }

    SettingsModal .setting-row {
        height: auto;
        padding: 0 0 1 0;
    }

    SettingsModal .setting-label {
        color: $text;
        text-style: bold;
    }

    SettingsModal Input {
        width: 100%;
        margin: 0;
    }

    SettingsModal .toggle-row {
        height: auto;
        align: left middle;
    }

    SettingsModal .toggle-row Label {
        margin-right: 2;
    }

    SettingsModal .file-path {
        color: $text-disabled;
        text-style: italic;
        padding: 1 0 0 0;
        text-align: center;
    }

    SettingsModal .button-row {
        padding-top: 1;
        align: center middle;
        height: auto;
    }

    SettingsModal .button-row Button {
        margin: 0 1;
    }
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings or default_settings

    def compose(self) -> ComposeResult:
        settings = self._settings
        with Vertical():
            yield Static("Mob Settings", classes="modal-title")

            with VerticalScroll(classes="settings-scroll"):
                # === Git ===
                yield Static("Git", classes="section-header")

                with Vertical(classes="setting-row"):
                    yield Static("Remote", classes="setting-label")
                    yield Input(
                        value=settings.remote_name,
                        placeholder="origin",
                        id="remote-input",
                    )

                with Vertical(classes="setting-row"):
                    yield Static("Base branch", classes="setting-label")
                    yield Input(
                        value=settings.base_branch,
                        placeholder="master",
                        id="base-branch-input",
                    )

                with Vertical(classes="setting-row"):
                    yield Static("WIP branch", classes="setting-label")
                    yield Input(
                        value=settings.wip_branch,
                        placeholder="mob-session",
                        id="wip-branch-input",
                    )

                # === Timer ===
                yield Static("Timer", classes="section-header")

                with Vertical(classes="setting-row"):
                    yield Static("Minutes", classes="setting-label")
                    yield Input(
                        value=str(settings.timer_minutes),
                        restrict=r"[0-9]*",
                        max_length=4,
                        id="timer-minutes-input",
                    )

                with Horizontal(classes="toggle-row"):
                    yield Label("Play sound when timer ends")
                    yield Switch(value=settings.timer_sound, id="timer-sound-switch")

                with Horizontal(classes="toggle-row"):
                    yield Label("Start screen share with session")
                    yield Switch(
                        value=settings.start_with_share, id="start-with-share-switch"
                    )

            yield Static(
                f"Settings file: {get_settings_path()}",
                classes="file-path",
            )

            with Horizontal(classes="button-row"):
                yield Button("Save", id="btn-save", variant="primary")
                yield Button("Close", id="btn-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-save":
            if not self._save_settings():
                return
            self.dismiss(True)
            return
        self.dismiss(False)

    def _save_settings(self) -> bool:
        """Save all settings.

        Returns:
            False if a value was rejected and nothing was saved.
        """
        minutes_text = self.query_one("#timer-minutes-input", Input).value
        try:
            minutes = parse_timer_minutes(minutes_text)
        except InvalidTimerMinutesError:
            self.notify("Timer minutes must be a positive number", severity="error")
            return False

        settings = self._settings
        remote = self.query_one("#remote-input", Input).value.strip()
        if remote:
            settings.remote_name = remote
        base_branch = self.query_one("#base-branch-input", Input).value.strip()
        if base_branch:
            settings.base_branch = base_branch
        wip_branch = self.query_one("#wip-branch-input", Input).value.strip()
        if wip_branch:
            settings.wip_branch = wip_branch

        settings.timer_minutes = minutes
        settings.timer_sound = self.query_one("#timer-sound-switch", Switch).value
        settings.start_with_share = self.query_one(
            "#start-with-share-switch", Switch
        ).value

        self.notify("Settings saved", severity="information")
        logger.info(
            "Settings saved: remote=%s, base=%s, wip=%s, minutes=%d",
            settings.remote_name,
            settings.base_branch,
            settings.wip_branch,
            settings.timer_minutes,
        )
        return True

    def action_close(self) -> None:
        """Close the modal without saving."""
        self.dismiss(False)
