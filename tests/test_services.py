"""
Tests for the engine's services: answer sheet, countdown and scoring
"""

import pytest

from conftest import make_definition
from lingua_quiz.core.errors import OutOfRangeError
from lingua_quiz.core.services.answer_sheet import AnswerSheet
from lingua_quiz.core.services.countdown import Countdown
from lingua_quiz.core.services.scoring import percent_round_half_up, score_attempt


class TestAnswerSheet:
    """Recording and validating selected options."""

    def test_record_returns_previous_answer(self, definition):
        sheet = AnswerSheet(definition)
        assert sheet.record(0, 1) is None
        assert sheet.record(0, 2) == 1
        assert sheet.get(0) == 2
        assert sheet.answered_count() == 1

    def test_unanswered_has_no_entry(self, definition):
        sheet = AnswerSheet(definition)
        sheet.record(3, 0)
        assert sheet.is_answered(3)
        assert not sheet.is_answered(0)
        assert sheet.get(0) is None
        assert dict(sheet.snapshot()) == {3: 0}

    def test_option_range_is_per_question(self):
        sheet = AnswerSheet(make_definition(question_count=2, option_count=2))
        sheet.record(1, 1)
        with pytest.raises(OutOfRangeError):
            sheet.record(1, 2)

    def test_snapshot_is_detached(self, definition):
        sheet = AnswerSheet(definition)
        sheet.record(0, 0)
        snapshot = sheet.snapshot()
        sheet.record(1, 1)
        assert dict(snapshot) == {0: 0}
        with pytest.raises(TypeError):
            snapshot[2] = 2

    def test_clear(self, definition):
        sheet = AnswerSheet(definition)
        sheet.record(0, 0)
        sheet.clear()
        assert sheet.answered_count() == 0

    def test_check_question_index(self, definition):
        sheet = AnswerSheet(definition)
        assert sheet.check_question_index(4) == 4
        with pytest.raises(OutOfRangeError):
            sheet.check_question_index(5)
        with pytest.raises(OutOfRangeError):
            sheet.check_question_index("1")


class TestCountdown:
    """Caller-driven countdown arithmetic."""

    def test_starts_at_limit(self):
        countdown = Countdown(90)
        assert countdown.limit_seconds == 90
        assert countdown.remaining_seconds == 90
        assert countdown.elapsed_seconds == 0
        assert not countdown.is_expired()

    def test_advance_and_elapsed(self):
        countdown = Countdown(90)
        assert countdown.advance(30) == 60
        assert countdown.elapsed_seconds == 30

    def test_advance_clamps_at_zero(self):
        countdown = Countdown(10)
        assert countdown.advance(25) == 0
        assert countdown.is_expired()
        assert countdown.elapsed_seconds == 10

    @pytest.mark.parametrize("elapsed", [-1, 1.0, "1", True])
    def test_invalid_elapsed(self, elapsed):
        countdown = Countdown(10)
        with pytest.raises(ValueError):
            countdown.advance(elapsed)
        assert countdown.remaining_seconds == 10

    def test_restart(self):
        countdown = Countdown(10)
        countdown.advance(4)
        countdown.restart()
        assert countdown.remaining_seconds == 10


class TestPercentRounding:
    """round(100 * part / whole) with halves rounded up."""

    @pytest.mark.parametrize(
        "part, whole, expected",
        [
            (0, 5, 0),
            (4, 5, 80),
            (3, 5, 60),
            (5, 5, 100),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),
            (3, 8, 38),
            (1, 200, 1),
            (1, 6, 17),
        ],
    )
    def test_rounding(self, part, whole, expected):
        assert percent_round_half_up(part, whole) == expected

    def test_zero_whole_rejected(self):
        with pytest.raises(ValueError):
            percent_round_half_up(0, 0)


class TestScoreAttempt:
    """Scoring a frozen answer mapping."""

    def test_outcomes_and_totals(self, definition):
        answers = {0: 0, 1: 0, 2: 2}
        result = score_attempt(definition, answers, 42)
        assert [o.is_correct for o in result.per_question] == [True, False, True, False, False]
        assert [o.selected_option_index for o in result.per_question] == [0, 0, 2, None, None]
        assert result.correct_count == 2
        assert result.incorrect_count == 3
        assert result.unanswered_count == 2
        assert result.score_percent == 40
        assert result.passed is False
        assert result.time_taken_seconds == 42
        assert result.auto_submitted is False

    def test_fractional_threshold(self):
        definition = make_definition(question_count=8, pass_threshold_percent=62.5)
        answers = {index: index % 4 for index in range(5)}
        result = score_attempt(definition, answers, 0)
        assert result.score_percent == 63
        assert result.passed is True

    def test_auto_submitted_flag_does_not_affect_equality(self, definition):
        first = score_attempt(definition, {}, 600, auto_submitted=True)
        second = score_attempt(definition, {}, 600)
        assert first.auto_submitted is True
        assert first == second
