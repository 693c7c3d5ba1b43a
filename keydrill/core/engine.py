"""Public entry points the shell drives a session through.

Both finish triggers (countdown expiry and the event-driven ends: reaction
hit target, exact paragraph completion) funnel into :func:`finalize`, which
scores once and returns the stored result on every later call.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from keydrill.core import clock as session_clock
from keydrill.core.evaluator import InputEvent, evaluate
from keydrill.core.generator import prepare_first_unit
from keydrill.core.models import Difficulty, GameMode, GameStats
from keydrill.core.scorer import score
from keydrill.core.session import Session, wall_clock_ms
from keydrill.core.settings import Settings
from keydrill.core.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def start_session(
    mode: GameMode,
    difficulty: Difficulty,
    *,
    vocabulary: Optional[Vocabulary] = None,
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Session:
    """Create a session and generate its first unit of practice text."""
    session = Session(
        mode=GameMode(mode),
        difficulty=Difficulty(difficulty),
        vocabulary=vocabulary or Vocabulary.load(),
        settings=settings or Settings(),
        clock=clock or wall_clock_ms,
    )
    prepare_first_unit(session)
    logger.info("Started %s session (%s)", session.mode.value, session.difficulty.value)
    return session


def handle_input(session: Session, event: InputEvent) -> Session:
    evaluate(session, event)
    if not session.is_finished and (session.reaction_target_reached() or session.paragraph_completed()):
        finalize(session)
    return session


def tick(session: Session) -> Session:
    if session_clock.advance(session):
        finalize(session)
    return session


def force_finish(session: Session) -> GameStats:
    """End the session early, e.g. from an "End Game" button."""
    return finalize(session)


def finalize(session: Session) -> GameStats:
    if session.stats is not None:
        return session.stats
    session.stats = score(session)
    logger.info(
        "Finished %s session: %d correct, %d errors, %.1f%% accuracy, %d wpm",
        session.mode.value,
        session.stats.correct,
        session.stats.errors,
        session.stats.accuracy,
        session.stats.wpm,
    )
    return session.stats
