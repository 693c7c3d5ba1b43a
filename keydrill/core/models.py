"""Enums, input events and the final statistics snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class GameMode(str, Enum):
    REACTION = "reaction"
    WORD = "word"
    PARAGRAPH = "paragraph"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameState(str, Enum):
    """Which screen the shell is showing."""

    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


SUBMIT_KEY = "Enter"


@dataclass(frozen=True)
class KeyPress:
    """A keydown as delivered by the shell.

    ``key`` is the produced character for printable keys and a
    multi-character name (``"Enter"``, ``"ArrowLeft"``, ``"Shift"``) otherwise.
    """

    key: str
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def is_printable(self) -> bool:
        """True for a single character typed without ctrl/alt/meta held."""
        return len(self.key) == 1 and not (self.ctrl or self.alt or self.meta)


@dataclass(frozen=True)
class TextChanged:
    """The text field's full new value."""

    value: str


@dataclass(frozen=True)
class GameStats:
    """Summary of a finished session. Produced once by the scorer."""

    time: float
    correct: int
    errors: int
    missed: int
    accuracy: float
    wpm: int
    reaction_times: Tuple[float, ...] = field(default_factory=tuple)
    avg_reaction_time: float = 0.0
    total_words: int = 0
    total_chars: int = 0
