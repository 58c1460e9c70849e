"""Mob session start application."""

import logging

from textual.app import App
from textual.binding import Binding

from mobtimer.config import Settings
from mobtimer.config import settings as default_settings
from mobtimer.start.request import SessionStartRequest, StartDecision
from mobtimer.tui.screens.settings import SettingsModal
from mobtimer.tui.screens.start_dialog import StartDialog

logger = logging.getLogger(__name__)


class MobApp(App[SessionStartRequest | None]):
    """Shows the start dialog and returns the confirmed request.

    The app exits with the confirmed SessionStartRequest, or None when
    the user cancels.
    """

    TITLE = "mobtimer"
    SUB_TITLE = "Start a mob programming session"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        settings: Settings | None = None,
        timer_minutes: int | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or default_settings
        self._timer_minutes_override = timer_minutes

    def on_mount(self) -> None:
        self.show_start_dialog()

    def show_start_dialog(self) -> StartDialog:
        """Pre-fill a start dialog from settings and show it."""
        settings = self._settings
        dialog = StartDialog()
        dialog.timer_minutes = self._timer_minutes_override or settings.timer_minutes
        dialog.timer_sound = settings.timer_sound
        dialog.start_with_share = settings.start_with_share

        can_execute, reason = settings.validate_for_start()
        if not can_execute:
            logger.warning("Start precondition failed: %s", reason)
        dialog.set_precondition_result(can_execute, reason)

        self.push_screen(dialog, self._on_start_dialog_closed)
        return dialog

    def _on_start_dialog_closed(self, result: SessionStartRequest | None) -> None:
        if result is None or result.decision is StartDecision.CANCELLED:
            logger.info("Mob session start cancelled")
            self.exit(None)
        elif result.decision is StartDecision.OPEN_SETTINGS:
            self.push_screen(SettingsModal(self._settings), self._on_settings_closed)
        else:
            self._remember(result)
            self.exit(result)

    def _on_settings_closed(self, saved: bool | None) -> None:
        logger.debug("Settings closed (saved=%s), reopening start dialog", saved)
        self._timer_minutes_override = None
        self.show_start_dialog()

    def _remember(self, result: SessionStartRequest) -> None:
        """Persist the confirmed values as the next defaults."""
        settings = self._settings
        if result.timer_minutes is not None:
            settings.timer_minutes = result.timer_minutes
        settings.timer_sound = result.timer_sound
        settings.start_with_share = result.start_with_share
        logger.info("Mob session start confirmed: %s", result.to_dict())
