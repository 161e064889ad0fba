"""
Presentation-side glue: key events in, notifications out.

InputController maps raw key names (or pointer clicks on labeled keys) to
session operations and owns the input enable/disable switch. A view
disables input while a reveal is playing and re-enables it afterwards;
once the session is over input stays disabled.

Notifications are the messages a view should display. They are plain data;
`duration_ms=None` means the view should not auto-dismiss.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from dailyword.engine.validation import is_letter
from .session import GameSession, Outcome, RejectReason, Rejected, Scored, SubmitResult

logger = logging.getLogger(__name__)

ALERT_MS = 1000
WIN_ALERT_MS = 5000

ENTER_KEYS = frozenset({"Enter"})
DELETE_KEYS = frozenset({"Backspace", "Delete"})


@dataclass(frozen=True)
class Notification:
    message: str
    duration_ms: Optional[int] = ALERT_MS


_REJECT_MESSAGES = {
    RejectReason.TOO_SHORT: "Not enough letters",
    RejectReason.NOT_IN_DICTIONARY: "Not in word list",
}


def notification_for(result: SubmitResult, target: str) -> Optional[Notification]:
    """Message to show for a submit result, or None when play simply continues."""
    if isinstance(result, Rejected):
        return Notification(_REJECT_MESSAGES[result.reason])
    if isinstance(result, Scored):
        if result.outcome is Outcome.WON:
            return Notification("You Got it!", WIN_ALERT_MS)
        if result.outcome is Outcome.LOST:
            return Notification(target.upper(), None)
    return None


class InputController:
    def __init__(self, session: GameSession):
        self.session = session
        self._enabled = True
        self.last_result: Optional[SubmitResult] = None

    @property
    def enabled(self) -> bool:
        return self._enabled and not self.session.is_over

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def letter_pressed(self, ch: str) -> bool:
        if not self.enabled:
            return False
        return self.session.type_letter(ch)

    def backspace_pressed(self) -> bool:
        if not self.enabled:
            return False
        return self.session.delete_letter()

    def enter_pressed(self) -> Optional[SubmitResult]:
        """Submit the active entry; None if input is disabled."""
        if not self.enabled:
            return None
        self.last_result = self.session.submit_guess()
        return self.last_result

    def handle_key(self, key: str):
        """
        Dispatch a physical key name: a-z, Backspace/Delete, Enter.
        Anything else is ignored (returns None).
        """
        if key in ENTER_KEYS:
            return self.enter_pressed()
        if key in DELETE_KEYS:
            return self.backspace_pressed()
        if is_letter(key):
            return self.letter_pressed(key)
        logger.debug("ignored key %r", key)
        return None
