"""Session start decision and values collected by the start dialog.

The start dialog reports exactly one terminal decision together with the
values the user entered. This module holds those types plus the parsing and
message formatting they depend on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

PRECONDITION_MESSAGE = "Cannot start mob session: {reason}"


class StartDecision(Enum):
    """Terminal actions of the start dialog."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    OPEN_SETTINGS = "open_settings"


class InvalidTimerMinutesError(ValueError):
    """Raised when the timer field does not hold a positive integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid timer minutes: {text!r}")


class StartDialogClosedError(RuntimeError):
    """Raised when a closed start dialog is modified."""


def parse_timer_minutes(text: str) -> int:
    """Parse the timer field content.

    Args:
        text: Raw field content.

    Returns:
        The number of minutes.

    Raises:
        InvalidTimerMinutesError: If the text is empty, not a plain run of
            digits, or zero.
    """
    stripped = text.strip()
    if not stripped.isascii() or not stripped.isdigit():
        raise InvalidTimerMinutesError(text)
    minutes = int(stripped)
    if minutes <= 0:
        raise InvalidTimerMinutesError(text)
    return minutes


def format_precondition_message(reason: str | None) -> str:
    """Format the message shown when the session cannot be started."""
    return PRECONDITION_MESSAGE.format(reason=reason or "unknown reason")


@dataclass(frozen=True)
class SessionStartRequest:
    """Outcome of the start dialog."""

    decision: StartDecision
    timer_minutes: int | None  # None if the field was invalid at close
    timer_sound: bool = False
    start_with_share: bool = False

    @property
    def is_ok(self) -> bool:
        return self.decision is StartDecision.CONFIRMED

    @property
    def is_open_settings(self) -> bool:
        return self.decision is StartDecision.OPEN_SETTINGS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "decision": self.decision.value,
            "timer_minutes": self.timer_minutes,
            "timer_sound": self.timer_sound,
            "start_with_share": self.start_with_share,
        }
