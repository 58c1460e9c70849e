"""Start dialog for a mob programming session.

Collects the timer duration and session flags, and reports exactly one
terminal decision: confirm, cancel, or open the settings screen.
"""

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, Input, Label, Static

from mobtimer.start.request import (
    InvalidTimerMinutesError,
    SessionStartRequest,
    StartDecision,
    StartDialogClosedError,
    format_precondition_message,
    parse_timer_minutes,
)

logger = logging.getLogger(__name__)


class StartDialog(ModalScreen[SessionStartRequest]):
    """Modal that gathers session start parameters.

    Values may be set before the dialog is shown and read after it is
    dismissed; the last widget state is kept on the instance.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
        # Default button: Enter confirms from any field, space still toggles
        Binding("enter", "confirm", "OK", show=True, priority=True),
    ]

    DEFAULT_CSS = """
    StartDialog {
        align: center middle;
    }

    StartDialog > Vertical {
        width: 64;
        max-width: 90%;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    StartDialog .modal-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }

    StartDialog .timer-row {
        height: auto;
        align: left middle;
    }

    StartDialog .timer-row Label {
        margin-right: 1;
    }

    StartDialog #timer-minutes {
        width: 12;
    }

    StartDialog #precondition-message {
        color: $error;
        padding: 1 0 0 0;
    }

    StartDialog .button-row {
        padding-top: 1;
        align: center middle;
        height: auto;
    }

    StartDialog .button-row Button {
        margin: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._timer_text = ""
        self._timer_sound = False
        self._start_with_share = False
        self._can_execute = True
        self._message: str | None = None
        self._decision: StartDecision | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Start Mob Session", classes="modal-title")
            with Horizontal(classes="timer-row"):
                yield Label("Timer (minutes)")
                yield Input(
                    value=self._timer_text,
                    restrict=r"[0-9]*",
                    max_length=4,
                    id="timer-minutes",
                )
            yield Checkbox(
                "Play sound when timer ends",
                value=self._timer_sound,
                id="timer-sound",
            )
            yield Checkbox(
                "Start screen share",
                value=self._start_with_share,
                id="start-with-share",
            )
            message = Static(
                Text(self._message or ""),
                id="precondition-message",
            )
            message.display = not self._can_execute
            yield message
            with Horizontal(classes="button-row"):
                yield Button(
                    "OK",
                    id="btn-ok",
                    variant="primary",
                    disabled=not self._can_execute,
                )
                yield Button("Cancel", id="btn-cancel")
                yield Button("Open Settings", id="btn-open-settings")

    def on_mount(self) -> None:
        self.query_one("#timer-minutes", Input).focus()

    # --- Caller API ---

    def set_precondition_result(
        self, can_execute: bool, reason: str | None = None
    ) -> None:
        """Set the result of the start precondition check.

        Args:
            can_execute: Whether the OK button is enabled.
            reason: Why the session cannot start, shown when
                ``can_execute`` is False.
        """
        self._ensure_open()
        self._can_execute = can_execute
        self._message = None if can_execute else format_precondition_message(reason)
        if not self.is_mounted:
            return
        self.query_one("#btn-ok", Button).disabled = not can_execute
        message = self.query_one("#precondition-message", Static)
        message.update(Text(self._message or ""))
        message.display = not can_execute

    @property
    def can_execute(self) -> bool:
        """Whether the OK action is available."""
        return self._can_execute

    @property
    def message(self) -> str | None:
        """Precondition message, or None when it is hidden."""
        return self._message

    @property
    def timer_minutes(self) -> int:
        """Minutes entered in the timer field.

        Raises:
            InvalidTimerMinutesError: If the field is empty or invalid.
        """
        return parse_timer_minutes(self._timer_text)

    @timer_minutes.setter
    def timer_minutes(self, minutes: int) -> None:
        self._ensure_open()
        self._timer_text = str(minutes)
        if self.is_mounted:
            self.query_one("#timer-minutes", Input).value = self._timer_text

    @property
    def timer_sound(self) -> bool:
        """Whether a sound plays when the timer runs out."""
        return self._timer_sound

    @timer_sound.setter
    def timer_sound(self, value: bool) -> None:
        self._ensure_open()
        self._timer_sound = value
        if self.is_mounted:
            self.query_one("#timer-sound", Checkbox).value = value

    @property
    def start_with_share(self) -> bool:
        """Whether screen sharing starts with the session."""
        return self._start_with_share

    @start_with_share.setter
    def start_with_share(self, value: bool) -> None:
        self._ensure_open()
        self._start_with_share = value
        if self.is_mounted:
            self.query_one("#start-with-share", Checkbox).value = value

    @property
    def decision(self) -> StartDecision | None:
        """Terminal decision, or None while the dialog is open."""
        return self._decision

    @property
    def is_ok(self) -> bool:
        """True once the dialog was confirmed."""
        return self._decision is StartDecision.CONFIRMED

    @property
    def is_open_settings(self) -> bool:
        """True once the user asked for the settings screen."""
        return self._decision is StartDecision.OPEN_SETTINGS

    # --- Widget events ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "timer-minutes" and self._decision is None:
            self._timer_text = event.value

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if self._decision is not None:
            return
        if event.checkbox.id == "timer-sound":
            self._timer_sound = event.value
        elif event.checkbox.id == "start-with-share":
            self._start_with_share = event.value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "btn-ok":
            self.action_confirm()
        elif button_id == "btn-cancel":
            self.action_cancel()
        elif button_id == "btn-open-settings":
            self.action_open_settings()

    # --- Terminal actions ---

    def action_confirm(self) -> None:
        """Confirm the session start."""
        if not self._can_execute:
            return
        self._sync_from_widgets()
        try:
            parse_timer_minutes(self._timer_text)
        except InvalidTimerMinutesError:
            self.notify("Timer minutes must be a positive number", severity="error")
            return
        self._finish(StartDecision.CONFIRMED)

    def action_cancel(self) -> None:
        """Close without starting."""
        self._finish(StartDecision.CANCELLED)

    def action_open_settings(self) -> None:
        """Close and ask the caller to show the settings screen."""
        self._finish(StartDecision.OPEN_SETTINGS)

    def _finish(self, decision: StartDecision) -> None:
        if self._decision is not None:
            logger.debug(
                "Ignoring %s, dialog already closed as %s",
                decision.value,
                self._decision.value,
            )
            return
        self._sync_from_widgets()
        self._decision = decision
        result = self.to_request()
        logger.info("Start dialog closed: %s", result.to_dict())
        self.dismiss(result)

    def to_request(self) -> SessionStartRequest:
        """Snapshot of the current decision and field values."""
        try:
            minutes: int | None = parse_timer_minutes(self._timer_text)
        except InvalidTimerMinutesError:
            minutes = None
        return SessionStartRequest(
            decision=self._decision or StartDecision.CANCELLED,
            timer_minutes=minutes,
            timer_sound=self._timer_sound,
            start_with_share=self._start_with_share,
        )

    def _sync_from_widgets(self) -> None:
        if not self.is_mounted or self._decision is not None:
            return
        self._timer_text = self.query_one("#timer-minutes", Input).value
        self._timer_sound = self.query_one("#timer-sound", Checkbox).value
        self._start_with_share = self.query_one("#start-with-share", Checkbox).value

    def _ensure_open(self) -> None:
        if self._decision is not None:
            raise StartDialogClosedError(
                f"Start dialog already closed ({self._decision.value})"
            )
