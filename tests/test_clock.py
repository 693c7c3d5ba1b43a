"""Tests for keydrill.core.clock – countdown and time display."""

from __future__ import annotations

from keydrill.core.clock import advance, display_time, input_enabled
from keydrill.core.models import Difficulty, GameMode
from keydrill.core.session import Session
from keydrill.core.settings import Settings


def _session(mode, vocab, clock, duration: int = 60) -> Session:
    return Session(
        mode=mode,
        difficulty=Difficulty.EASY,
        vocabulary=vocab,
        settings=Settings(game_duration=duration),
        clock=clock,
    )


class TestAdvance:
    def test_counts_down(self, vocab, clock):
        s = _session(GameMode.WORD, vocab, clock)
        assert s.remaining_time == 60
        assert advance(s) is False
        assert s.remaining_time == 59
        assert s.elapsed_seconds == 1

    def test_expires_at_zero(self, vocab, clock):
        s = _session(GameMode.PARAGRAPH, vocab, clock, duration=3)
        results = [advance(s) for _ in range(3)]
        assert results == [False, False, True]
        assert s.remaining_time == 0

    def test_never_negative(self, vocab, clock):
        s = _session(GameMode.WORD, vocab, clock, duration=1)
        advance(s)
        advance(s)
        assert s.remaining_time == 0

    def test_reaction_has_no_countdown(self, vocab, clock):
        s = _session(GameMode.REACTION, vocab, clock)
        assert advance(s) is False
        assert s.remaining_time == 0


class TestDisplay:
    def test_countdown_seconds(self, vocab, clock):
        s = _session(GameMode.WORD, vocab, clock)
        advance(s)
        assert display_time(s) == "59"

    def test_reaction_total(self, vocab, clock):
        s = _session(GameMode.REACTION, vocab, clock)
        s.reaction_total_ms = 1234
        assert display_time(s) == "1.23s"
        assert s.elapsed_seconds == 1.234


class TestInputEnabled:
    def test_enabled_while_running(self, vocab, clock):
        assert input_enabled(_session(GameMode.WORD, vocab, clock))
        assert input_enabled(_session(GameMode.REACTION, vocab, clock))

    def test_disabled_when_time_runs_out(self, vocab, clock):
        s = _session(GameMode.WORD, vocab, clock, duration=1)
        advance(s)
        assert not input_enabled(s)
