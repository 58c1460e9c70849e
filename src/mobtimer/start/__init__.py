"""Session start model."""

from mobtimer.start.request import (
    PRECONDITION_MESSAGE,
    InvalidTimerMinutesError,
    SessionStartRequest,
    StartDecision,
    StartDialogClosedError,
    format_precondition_message,
    parse_timer_minutes,
)

__all__ = [
    "PRECONDITION_MESSAGE",
    "InvalidTimerMinutesError",
    "SessionStartRequest",
    "StartDecision",
    "StartDialogClosedError",
    "format_precondition_message",
    "parse_timer_minutes",
]
