from __future__ import annotations

import logging

from keydrill.core.session import Session

logger = logging.getLogger(__name__)


def advance(session: Session) -> bool:
    """Count one second off a timed session.

    Returns True when the countdown has run out and the session should
    finish. Reaction sessions have no countdown and never expire here.
    """
    if not session.is_timed or session.is_finished:
        return False
    session.remaining_time = max(0, session.remaining_time - 1)
    if session.remaining_time == 0:
        logger.debug("Countdown expired for %s session", session.mode.value)
        return True
    return False


def input_enabled(session: Session) -> bool:
    if session.is_finished:
        return False
    return not (session.is_timed and session.remaining_time <= 0)


def display_time(session: Session) -> str:
    """Time as shown while playing: seconds left, or summed reaction time."""
    if session.is_timed:
        return str(session.remaining_time)
    return f"{session.reaction_total_ms / 1000.0:.2f}s"
