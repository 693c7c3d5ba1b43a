"""Applies raw input events to a session under per-mode rules."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Union

from keydrill.core.generator import next_unit
from keydrill.core.models import SUBMIT_KEY, GameMode, KeyPress, TextChanged
from keydrill.core.scorer import accuracy, count_matching
from keydrill.core.session import Session

logger = logging.getLogger(__name__)

InputEvent = Union[KeyPress, TextChanged]


class Feedback(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    WRONG = "wrong"


class CharMark(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    WRONG = "wrong"
    MISSED_SPACE = "missed_space"


def evaluate(session: Session, event: InputEvent) -> Session:
    """Update *session* counters for one event. Finished sessions ignore input."""
    if session.is_finished:
        return session
    if session.mode is GameMode.REACTION:
        if isinstance(event, KeyPress):
            _on_reaction_key(session, event)
    elif session.mode is GameMode.WORD:
        if isinstance(event, TextChanged):
            session.user_input = event.value
        elif event.key == SUBMIT_KEY:
            _submit_word(session)
    elif isinstance(event, TextChanged):
        _on_paragraph_change(session, event.value)
    return session


def _on_reaction_key(session: Session, event: KeyPress) -> None:
    if session.reaction_target_reached():
        return
    if event.key.lower() == session.practice_text.lower():
        latency = session.clock() - session.unit_started_ms
        session.reaction_times.append(latency)
        session.correct += 1
        session.reaction_total_ms += latency
        session.running_accuracy = accuracy(session.correct, session.errors)
        logger.debug("Hit %r in %.0f ms (%d so far)", event.key, latency, session.correct)
        if not session.reaction_target_reached():
            next_unit(session)
    elif event.is_printable:
        session.errors += 1
        session.running_accuracy = accuracy(session.correct, session.errors)


def _submit_word(session: Session) -> None:
    target = session.practice_text
    if session.user_input.strip() == target:
        session.correct += len(target)
    else:
        session.errors += len(target)
        session.missed += 1
        logger.debug("Missed %r (typed %r)", target, session.user_input)
    session.running_accuracy = accuracy(session.correct, session.errors, session.missed)
    session.user_input = ""
    next_unit(session)


def _on_paragraph_change(session: Session, value: str) -> None:
    session.user_input = value
    correct = count_matching(value, session.practice_text)
    session.correct = correct
    session.errors = len(value) - correct
    session.running_accuracy = (correct / len(value)) * 100.0 if value else 100.0


def word_feedback(target: str, typed: str) -> Feedback:
    """Colour hint for the word being typed: on track so far, or already off."""
    if not typed:
        return Feedback.PENDING
    if typed == target or target.startswith(typed):
        return Feedback.CORRECT
    return Feedback.WRONG


def paragraph_marks(target: str, typed: str) -> List[CharMark]:
    marks: List[CharMark] = []
    for index, char in enumerate(target):
        if index >= len(typed):
            marks.append(CharMark.PENDING)
        elif typed[index] == char:
            marks.append(CharMark.CORRECT)
        elif char == " ":
            marks.append(CharMark.MISSED_SPACE)
        else:
            marks.append(CharMark.WRONG)
    return marks
