from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from keydrill.core.models import Difficulty

logger = logging.getLogger(__name__)

DEFAULT_PARAGRAPH_WORDS = 30


def default_vocabulary_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "vocabulary.yaml"


class Vocabulary:
    """Alphabets per difficulty and the fixed word list they are sampled from.

    Words are filtered per tier so that every character, compared
    case-insensitively, belongs to that tier's alphabet. When a tier's
    alphabet rules out every word the full list is used instead.
    """

    def __init__(
        self,
        alphabets: Dict[Difficulty, str],
        words: List[str],
        rng: Optional[random.Random] = None,
    ) -> None:
        missing = [d.value for d in Difficulty if not alphabets.get(d)]
        if missing:
            raise ValueError(f"Missing alphabet for difficulty: {', '.join(missing)}")
        if not words:
            raise ValueError("Word list is empty")
        self._alphabets = dict(alphabets)
        self._words = list(words)
        self._rng = rng or random.Random()
        self._usable: Dict[Difficulty, List[str]] = {}

    @classmethod
    def load(cls, path: Optional[Path] = None, rng: Optional[random.Random] = None) -> "Vocabulary":
        path = path or default_vocabulary_path()
        if not path.exists():
            raise FileNotFoundError(f"Vocabulary file not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected YAML with 'alphabets' and 'words'")
        raw_alphabets = raw.get("alphabets")
        if not isinstance(raw_alphabets, dict):
            raise ValueError(f"{path.name}: missing or invalid 'alphabets'")
        raw_words = raw.get("words")
        if not isinstance(raw_words, list):
            raise ValueError(f"{path.name}: missing or invalid 'words'")

        alphabets: Dict[Difficulty, str] = {}
        for difficulty in Difficulty:
            chars = raw_alphabets.get(difficulty.value)
            if not chars or not isinstance(chars, str):
                raise ValueError(f"{path.name}: missing alphabet for '{difficulty.value}'")
            alphabets[difficulty] = chars

        words = [str(item).strip() for item in raw_words if str(item).strip()]
        if not words:
            raise ValueError(f"{path.name}: 'words' has no entries")

        logger.debug("Loaded %d words from %s", len(words), path)
        return cls(alphabets, words, rng=rng)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def alphabet_for(self, difficulty: Difficulty) -> str:
        return self._alphabets[difficulty]

    def usable_words(self, difficulty: Difficulty) -> List[str]:
        """Words typeable with the tier's alphabet, or the full list if none are."""
        cached = self._usable.get(difficulty)
        if cached is not None:
            return cached
        allowed = set(self.alphabet_for(difficulty).lower())
        filtered = [w for w in self._words if all(ch.lower() in allowed for ch in w)]
        if not filtered:
            logger.debug("No words fit the %s alphabet, using the full list", difficulty.value)
            filtered = list(self._words)
        self._usable[difficulty] = filtered
        return filtered

    def random_char(self, difficulty: Difficulty) -> str:
        return self._rng.choice(self.alphabet_for(difficulty))

    def random_word(self, difficulty: Difficulty) -> str:
        return self._rng.choice(self.usable_words(difficulty))

    def random_paragraph(self, difficulty: Difficulty, word_count: int = DEFAULT_PARAGRAPH_WORDS) -> str:
        words = [self.random_word(difficulty) for _ in range(word_count)]
        return " ".join(words).strip() + "."
