from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from keydrill.core.models import Difficulty, GameMode, GameStats
from keydrill.core.settings import Settings
from keydrill.core.vocabulary import Vocabulary


def wall_clock_ms() -> float:
    """Milliseconds since the epoch."""
    return time.time() * 1000.0


@dataclass
class Session:
    """Live state of one trial run.

    Counters are updated in place by the evaluator and the clock. Derived
    figures (WPM, final accuracy, average reaction) are not stored here;
    the scorer computes them once into ``stats``, which doubles as the
    finished flag.
    """

    mode: GameMode
    difficulty: Difficulty
    vocabulary: Vocabulary
    settings: Settings = field(default_factory=Settings)
    clock: Callable[[], float] = wall_clock_ms

    practice_text: str = ""
    user_input: str = ""
    remaining_time: int = 0
    reaction_total_ms: float = 0.0
    unit_started_ms: float = 0.0

    correct: int = 0
    errors: int = 0
    missed: int = 0
    reaction_times: List[float] = field(default_factory=list)
    total_words: int = 0
    total_chars: int = 0
    running_accuracy: float = 100.0

    stats: Optional[GameStats] = None

    def __post_init__(self) -> None:
        if self.mode is not GameMode.REACTION and not self.remaining_time:
            self.remaining_time = self.settings.game_duration

    @property
    def is_finished(self) -> bool:
        return self.stats is not None

    @property
    def is_timed(self) -> bool:
        """True for the countdown modes (Word, Paragraph)."""
        return self.mode is not GameMode.REACTION

    @property
    def elapsed_seconds(self) -> float:
        if self.is_timed:
            return float(self.settings.game_duration - self.remaining_time)
        return self.reaction_total_ms / 1000.0

    def reaction_target_reached(self) -> bool:
        return self.mode is GameMode.REACTION and self.correct >= self.settings.reaction_target

    def paragraph_completed(self) -> bool:
        return (
            self.mode is GameMode.PARAGRAPH
            and bool(self.practice_text)
            and self.user_input == self.practice_text
        )
