"""Shared fixtures: a seeded vocabulary and a hand-driven millisecond clock."""

from __future__ import annotations

import random

import pytest

from keydrill.core.vocabulary import Vocabulary


class FakeClock:
    """Millisecond clock that only moves when a test advances it."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture()
def vocab() -> Vocabulary:
    return Vocabulary.load(rng=random.Random(42))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
