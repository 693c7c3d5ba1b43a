"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from keydrill.core.models import Difficulty, GameMode, GameStats

MODE_LABELS = {
    GameMode.REACTION: "Reaction Time",
    GameMode.WORD: "Word Typing",
    GameMode.PARAGRAPH: "Paragraph Typing",
}

DIFFICULTY_LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}


@dataclass
class SetupSelection:
    """Mode and difficulty picked on the setup screen."""

    mode: GameMode = GameMode.REACTION
    difficulty: Difficulty = Difficulty.EASY


@dataclass(frozen=True)
class ResultCard:
    label: str
    value: str
    color_role: str = "default"


def result_cards(stats: GameStats) -> List[ResultCard]:
    """Cards for the results screen; optional figures only appear when non-zero."""
    cards = [ResultCard("Time Taken", f"{stats.time:.2f}s")]
    if stats.wpm > 0:
        cards.append(ResultCard("WPM", f"{stats.wpm:.0f}"))
    cards.append(ResultCard("Accuracy", f"{stats.accuracy:.2f}%"))
    if stats.avg_reaction_time > 0:
        cards.append(ResultCard("Avg. Reaction", f"{stats.avg_reaction_time:.0f}ms"))
    cards.append(ResultCard("Correct", str(stats.correct), "success"))
    cards.append(ResultCard("Errors", str(stats.errors), "danger"))
    if stats.missed > 0:
        cards.append(ResultCard("Missed Words", str(stats.missed), "warning"))
    if stats.total_words > 0:
        cards.append(ResultCard("Total Words", str(stats.total_words)))
    if stats.total_chars > 0:
        cards.append(ResultCard("Total Chars", str(stats.total_chars)))
    return cards


def live_cards(mode: GameMode, time_text: str, correct: int, errors: int, accuracy: float) -> List[Tuple[str, str]]:
    """(label, value) pairs for the stat row shown while playing."""
    return [
        ("Time", time_text),
        ("Correct" if mode is GameMode.REACTION else "Chars", str(correct)),
        ("Errors", str(errors)),
        ("Accuracy", f"{accuracy:.1f}%"),
    ]
