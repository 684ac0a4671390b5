"""Scoring of submitted attempts against the answer key."""

from __future__ import annotations

import logging
from typing import Mapping

from lingua_quiz.core.models import QuestionOutcome, QuizDefinition, QuizResult

logger = logging.getLogger(__name__)


def percent_round_half_up(part: int, whole: int) -> int:
    """Return ``round(100 * part / whole)`` with halves rounded up.

    Integer arithmetic only, so the result never depends on float rounding.
    """
    if whole <= 0:
        raise ValueError("Whole must be a positive integer.")
    return (200 * part + whole) // (2 * whole)


def score_attempt(
    definition: QuizDefinition,
    answers: Mapping[int, int],
    time_taken_seconds: int,
    *,
    auto_submitted: bool = False,
) -> QuizResult:
    """Build the result for a frozen answer mapping. Unanswered counts as incorrect."""
    outcomes: list[QuestionOutcome] = []
    for index, question in enumerate(definition.questions):
        selected = answers.get(index)
        outcomes.append(
            QuestionOutcome(
                question_id=question.id,
                selected_option_index=selected,
                correct_option_index=question.correct_option_index,
                is_correct=selected is not None and selected == question.correct_option_index,
            )
        )

    correct_count = sum(1 for outcome in outcomes if outcome.is_correct)
    score_percent = percent_round_half_up(correct_count, definition.question_count)
    passed = score_percent >= definition.pass_threshold_percent

    logger.debug(
        "Scored attempt: %d/%d correct, %d%%, passed=%s",
        correct_count,
        definition.question_count,
        score_percent,
        passed,
    )
    return QuizResult(
        per_question=tuple(outcomes),
        correct_count=correct_count,
        score_percent=score_percent,
        passed=passed,
        time_taken_seconds=time_taken_seconds,
        auto_submitted=auto_submitted,
    )
