from __future__ import annotations

import math
from typing import Sequence

from keydrill.core.models import GameMode, GameStats
from keydrill.core.session import Session


def count_matching(typed: str, target: str) -> int:
    """Number of positions where *typed* and *target* hold the same character."""
    return sum(1 for a, b in zip(typed, target) if a == b)


def accuracy(correct: int, errors: int, missed: int = 0) -> float:
    """Correct share of all attempts as a percentage; 100 when nothing was attempted."""
    total = correct + errors + missed
    if total <= 0:
        return 100.0
    return (correct / total) * 100.0


def words_per_minute(correct_chars: int, elapsed_seconds: float) -> int:
    """Standard WPM (five characters per word), rounded half up; 0 with no elapsed time."""
    if elapsed_seconds <= 0:
        return 0
    raw = (correct_chars / 5.0) / (elapsed_seconds / 60.0)
    return int(math.floor(raw + 0.5))


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def score(session: Session) -> GameStats:
    """Derive the final summary from a session's raw counters.

    Paragraph mode takes one last full comparison of the buffer against the
    paragraph; the running counter it replaces may lag behind the buffer.
    """
    elapsed = session.elapsed_seconds
    if session.mode is GameMode.PARAGRAPH:
        correct = count_matching(session.user_input, session.practice_text)
    else:
        correct = session.correct

    wpm = 0 if session.mode is GameMode.REACTION else words_per_minute(correct, elapsed)

    return GameStats(
        time=elapsed,
        correct=correct,
        errors=session.errors,
        missed=session.missed,
        accuracy=accuracy(correct, session.errors, session.missed),
        wpm=wpm,
        reaction_times=tuple(session.reaction_times),
        avg_reaction_time=mean(session.reaction_times),
        total_words=session.total_words,
        total_chars=session.total_chars,
    )
