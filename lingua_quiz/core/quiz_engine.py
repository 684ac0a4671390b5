"""Timed quiz engine: one attempt, caller-driven clock, score computed once."""

from __future__ import annotations

import logging

from lingua_quiz.core.errors import InvalidStateError, OutOfRangeError
from lingua_quiz.core.models import QuizDefinition, QuizResult, QuizState, QuizStatus
from lingua_quiz.core.services.answer_sheet import AnswerSheet
from lingua_quiz.core.services.countdown import Countdown
from lingua_quiz.core.services.scoring import score_attempt

logger = logging.getLogger(__name__)


class QuizEngine:
    """Facade over the answer sheet, countdown and scoring for a single attempt.

    State machine::

        NOT_STARTED --start()--> IN_PROGRESS --submit()--> SUBMITTED
        IN_PROGRESS --tick() reaching 0--> SUBMITTED

    ``SUBMITTED`` is terminal. A retake needs a new engine; there is no reset.
    The engine owns no timer: callers advance time with :meth:`tick`.
    """

    def __init__(self, definition: QuizDefinition) -> None:
        self._definition = definition
        self._status = QuizStatus.NOT_STARTED
        self._current_index = 0
        self._answers = AnswerSheet(definition)
        self._countdown = Countdown(definition.time_limit_seconds)
        self._result: QuizResult | None = None
        self._auto_submitted = False

    # --- Read-only properties ---

    @property
    def definition(self) -> QuizDefinition:
        return self._definition

    @property
    def status(self) -> QuizStatus:
        return self._status

    @property
    def is_submitted(self) -> bool:
        return self._status is QuizStatus.SUBMITTED

    @property
    def was_auto_submitted(self) -> bool:
        return self._auto_submitted

    # --- Lifecycle ---

    def start(self) -> None:
        if self._status is not QuizStatus.NOT_STARTED:
            raise InvalidStateError(
                f"start() requires a fresh attempt; status is {self._status.name}."
            )
        self._current_index = 0
        self._answers.clear()
        self._countdown.restart()
        self._status = QuizStatus.IN_PROGRESS
        logger.info(
            "Quiz '%s' started: %d questions, %ds limit",
            self._definition.title,
            self._definition.question_count,
            self._definition.time_limit_seconds,
        )

    def submit(self) -> QuizResult:
        """Freeze the attempt and score it. Only allowed once."""
        self._require_in_progress("submit")
        return self._finish(auto=False)

    def tick(self, elapsed_seconds: int = 1) -> int:
        """Advance the countdown; submits the attempt when it reaches zero."""
        self._require_in_progress("tick")
        remaining = self._countdown.advance(elapsed_seconds)
        if remaining == 0:
            logger.info("Time limit reached for quiz '%s'; submitting", self._definition.title)
            self._finish(auto=True)
        return remaining

    # --- Answers and navigation ---

    def select_answer(self, question_index: int, option_index: int) -> None:
        self._require_in_progress("select_answer")
        previous = self._answers.record(question_index, option_index)
        logger.debug(
            "Question %d answered with option %d (previous: %s)",
            question_index,
            option_index,
            previous,
        )

    def go_to_question(self, index: int) -> None:
        self._require_in_progress("go_to_question")
        self._current_index = self._answers.check_question_index(index)

    def next_question(self) -> int:
        self._require_in_progress("next_question")
        if self._current_index + 1 >= self._definition.question_count:
            raise OutOfRangeError("Already at the last question.")
        self._current_index += 1
        return self._current_index

    def previous_question(self) -> int:
        self._require_in_progress("previous_question")
        if self._current_index == 0:
            raise OutOfRangeError("Already at the first question.")
        self._current_index -= 1
        return self._current_index

    # --- Queries ---

    def get_state(self) -> QuizState:
        return QuizState(
            status=self._status,
            current_question_index=self._current_index,
            selected_answers=self._answers.snapshot(),
            remaining_seconds=self._countdown.remaining_seconds,
        )

    def get_result(self) -> QuizResult:
        if self._result is None:
            raise InvalidStateError(
                f"get_result() requires a submitted attempt; status is {self._status.name}."
            )
        return self._result

    # --- Internals ---

    def _require_in_progress(self, operation: str) -> None:
        if self._status is not QuizStatus.IN_PROGRESS:
            raise InvalidStateError(
                f"{operation}() requires an attempt in progress; status is {self._status.name}."
            )

    def _finish(self, auto: bool) -> QuizResult:
        self._status = QuizStatus.SUBMITTED
        self._auto_submitted = auto
        self._result = score_attempt(
            self._definition,
            self._answers.snapshot(),
            self._countdown.elapsed_seconds,
            auto_submitted=auto,
        )
        logger.info(
            "Quiz '%s' submitted%s: %d/%d correct (%d%%), %s, %ds taken",
            self._definition.title,
            " automatically" if auto else "",
            self._result.correct_count,
            self._result.question_count,
            self._result.score_percent,
            "passed" if self._result.passed else "failed",
            self._result.time_taken_seconds,
        )
        return self._result
