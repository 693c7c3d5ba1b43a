"""Tests for keydrill.core.engine – full session lifecycles."""

from __future__ import annotations

import pytest

from keydrill.core.engine import finalize, force_finish, handle_input, start_session, tick
from keydrill.core.models import Difficulty, GameMode, KeyPress, TextChanged
from keydrill.core.settings import Settings


# ---------------------------------------------------------------------------
# start_session
# ---------------------------------------------------------------------------

class TestStartSession:
    def test_reaction_start(self, vocab, clock):
        s = start_session(GameMode.REACTION, Difficulty.EASY, vocabulary=vocab, clock=clock)
        assert len(s.practice_text) == 1
        assert s.unit_started_ms == clock.now
        assert not s.is_finished

    def test_word_start(self, vocab, clock):
        s = start_session(GameMode.WORD, Difficulty.MEDIUM, vocabulary=vocab, clock=clock)
        assert s.total_words == 1
        assert s.remaining_time == 60

    def test_paragraph_start(self, vocab, clock):
        s = start_session(GameMode.PARAGRAPH, Difficulty.HARD, vocabulary=vocab, clock=clock)
        assert s.total_chars == len(s.practice_text)
        assert s.total_words == 30

    def test_accepts_enum_values(self, vocab, clock):
        s = start_session("word", "hard", vocabulary=vocab, clock=clock)  # type: ignore[arg-type]
        assert s.mode is GameMode.WORD
        assert s.difficulty is Difficulty.HARD

    def test_loads_bundled_vocabulary_by_default(self):
        s = start_session(GameMode.WORD, Difficulty.EASY)
        assert s.practice_text in s.vocabulary.words


# ---------------------------------------------------------------------------
# Immediate force finish
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("mode", list(GameMode))
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_force_finish_without_input(vocab, clock, mode, difficulty):
    s = start_session(mode, difficulty, vocabulary=vocab, clock=clock)
    stats = force_finish(s)
    assert stats.accuracy == 100
    assert stats.correct == 0
    assert stats.errors == 0
    assert stats.missed == 0
    assert stats.wpm == 0
    assert s.is_finished


# ---------------------------------------------------------------------------
# Reaction lifecycle
# ---------------------------------------------------------------------------

class TestReactionLifecycle:
    def test_twenty_hits_finish(self, vocab, clock):
        s = start_session(GameMode.REACTION, Difficulty.MEDIUM, vocabulary=vocab, clock=clock)
        latencies = []
        for i in range(20):
            assert not s.is_finished
            latency = 100 + i
            clock.advance(latency)
            latencies.append(latency)
            handle_input(s, KeyPress(s.practice_text))
        assert s.is_finished
        stats = s.stats
        assert list(stats.reaction_times) == latencies
        assert len(stats.reaction_times) == 20
        assert stats.avg_reaction_time == pytest.approx(sum(latencies) / 20)
        assert stats.time == pytest.approx(sum(latencies) / 1000)
        assert stats.correct == 20
        assert stats.wpm == 0

    def test_errors_lower_accuracy(self, vocab, clock):
        settings = Settings(reaction_target=1)
        s = start_session(GameMode.REACTION, Difficulty.EASY, vocabulary=vocab, settings=settings, clock=clock)
        wrong = "1"  # not in the easy alphabet
        handle_input(s, KeyPress(wrong))
        handle_input(s, KeyPress(s.practice_text))
        assert s.stats.errors == 1
        assert s.stats.accuracy == 50.0

    def test_input_after_finish_ignored(self, vocab, clock):
        settings = Settings(reaction_target=1)
        s = start_session(GameMode.REACTION, Difficulty.EASY, vocabulary=vocab, settings=settings, clock=clock)
        handle_input(s, KeyPress(s.practice_text))
        stats = s.stats
        handle_input(s, KeyPress("1"))
        assert s.errors == 0
        assert s.stats is stats

    def test_ticks_do_nothing(self, vocab, clock):
        s = start_session(GameMode.REACTION, Difficulty.EASY, vocabulary=vocab, clock=clock)
        for _ in range(120):
            tick(s)
        assert not s.is_finished


# ---------------------------------------------------------------------------
# Word lifecycle
# ---------------------------------------------------------------------------

class TestWordLifecycle:
    def test_match_and_miss(self, vocab, clock):
        s = start_session(GameMode.WORD, Difficulty.EASY, vocabulary=vocab, clock=clock)
        first = s.practice_text
        handle_input(s, TextChanged(first))
        handle_input(s, KeyPress("Enter"))
        assert s.correct == len(first)
        assert s.missed == 0

        second = s.practice_text
        handle_input(s, TextChanged(second + "zz"))
        handle_input(s, KeyPress("Enter"))
        assert s.correct == len(first)
        assert s.errors == len(second)
        assert s.missed == 1
        assert s.total_words == 3

    def test_countdown_without_input(self, vocab, clock):
        s = start_session(GameMode.WORD, Difficulty.EASY, vocabulary=vocab, clock=clock)
        for _ in range(59):
            tick(s)
        assert not s.is_finished
        tick(s)
        assert s.is_finished
        assert s.remaining_time == 0
        assert s.stats.time == 60
        assert s.stats.wpm == 0
        assert s.stats.accuracy == 100

    def test_wpm_over_partial_time(self, vocab, clock):
        s = start_session(
            GameMode.WORD, Difficulty.EASY, vocabulary=vocab, settings=Settings(game_duration=60), clock=clock
        )
        for _ in range(30):
            tick(s)
        s.correct = 50
        stats = force_finish(s)
        assert stats.time == 30
        assert stats.wpm == 20


# ---------------------------------------------------------------------------
# Paragraph lifecycle
# ---------------------------------------------------------------------------

class TestParagraphLifecycle:
    def test_exact_completion_finishes_immediately(self, vocab, clock):
        s = start_session(GameMode.PARAGRAPH, Difficulty.EASY, vocabulary=vocab, clock=clock)
        target = s.practice_text
        for _ in range(12):
            tick(s)
        handle_input(s, TextChanged(target[:-1]))
        assert not s.is_finished
        handle_input(s, TextChanged(target))
        assert s.is_finished
        assert s.stats.correct == len(target)
        assert s.stats.errors == 0
        assert s.stats.time == 12
        assert s.stats.accuracy == 100

    def test_sample_from_description(self, vocab, clock):
        s = start_session(GameMode.PARAGRAPH, Difficulty.EASY, vocabulary=vocab, clock=clock)
        s.practice_text = "cat dog"
        handle_input(s, TextChanged("cat dig"))
        assert s.correct == 6
        assert s.errors == len("cat dig") - s.correct
        assert not s.is_finished

    def test_countdown_without_input(self, vocab, clock):
        s = start_session(GameMode.PARAGRAPH, Difficulty.MEDIUM, vocabulary=vocab, clock=clock)
        for _ in range(60):
            tick(s)
        assert s.is_finished
        assert s.stats.wpm == 0
        assert s.stats.accuracy == 100


# ---------------------------------------------------------------------------
# Idempotent finish
# ---------------------------------------------------------------------------

class TestIdempotentFinish:
    def test_finalize_twice_same_stats(self, vocab, clock):
        s = start_session(GameMode.WORD, Difficulty.EASY, vocabulary=vocab, clock=clock)
        handle_input(s, TextChanged(s.practice_text))
        handle_input(s, KeyPress("Enter"))
        first = finalize(s)
        second = finalize(s)
        assert first is second
        assert force_finish(s) is first

    def test_tick_after_completion_changes_nothing(self, vocab, clock):
        s = start_session(GameMode.PARAGRAPH, Difficulty.EASY, vocabulary=vocab, clock=clock)
        tick(s)
        handle_input(s, TextChanged(s.practice_text))
        stats = s.stats
        remaining = s.remaining_time
        tick(s)
        assert s.stats is stats
        assert s.remaining_time == remaining

    def test_completion_after_expiry_changes_nothing(self, vocab, clock):
        s = start_session(
            GameMode.PARAGRAPH, Difficulty.EASY, vocabulary=vocab, settings=Settings(game_duration=1), clock=clock
        )
        tick(s)
        stats = s.stats
        handle_input(s, TextChanged(s.practice_text))
        assert s.stats is stats
        assert s.user_input == ""
