"""Produces the next unit of practice text for a session."""

from __future__ import annotations

import logging

from keydrill.core.models import GameMode
from keydrill.core.session import Session

logger = logging.getLogger(__name__)


def next_unit(session: Session) -> Session:
    """Replace ``practice_text`` with a fresh unit for the session's mode.

    Reaction stamps the presentation time; Word counts the word as presented.
    Paragraph text is generated once by :func:`prepare_first_unit` and is
    left untouched here.
    """
    vocabulary = session.vocabulary
    if session.mode is GameMode.REACTION:
        session.practice_text = vocabulary.random_char(session.difficulty)
        session.unit_started_ms = session.clock()
    elif session.mode is GameMode.WORD:
        session.practice_text = vocabulary.random_word(session.difficulty)
        session.total_words += 1
    else:
        logger.debug("Paragraph text is fixed for the session; not regenerating")
    return session


def prepare_first_unit(session: Session) -> Session:
    if session.mode is GameMode.PARAGRAPH:
        paragraph = session.vocabulary.random_paragraph(
            session.difficulty, session.settings.paragraph_words
        )
        session.practice_text = paragraph
        session.total_chars = len(paragraph)
        session.total_words = len(paragraph.split(" "))
        return session
    return next_unit(session)
