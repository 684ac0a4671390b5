"""Service for recording the learner's selected options."""

from __future__ import annotations

from typing import Mapping

from lingua_quiz.core.errors import OutOfRangeError
from lingua_quiz.core.models import QuizDefinition, freeze_answers


class AnswerSheet:
    """Validated mapping of question index to selected option index.

    Only answered questions have an entry; a missing key means unanswered.
    """

    def __init__(self, definition: QuizDefinition) -> None:
        self._definition = definition
        self._selected: dict[int, int] = {}

    def record(self, question_index: int, option_index: int) -> int | None:
        """Store an answer, replacing any earlier one. Returns the previous option."""
        question = self._definition.questions[self.check_question_index(question_index)]
        if not _is_index(option_index) or not 0 <= option_index < question.option_count:
            raise OutOfRangeError(
                f"Option index {option_index!r} is outside 0..{question.option_count - 1} "
                f"for question {question_index}."
            )
        previous = self._selected.get(question_index)
        self._selected[question_index] = option_index
        return previous

    def get(self, question_index: int) -> int | None:
        return self._selected.get(question_index)

    def is_answered(self, question_index: int) -> bool:
        return question_index in self._selected

    def answered_count(self) -> int:
        return len(self._selected)

    def snapshot(self) -> Mapping[int, int]:
        """Return a read-only copy of the recorded answers."""
        return freeze_answers(self._selected)

    def clear(self) -> None:
        self._selected.clear()

    def check_question_index(self, question_index: int) -> int:
        count = self._definition.question_count
        if not _is_index(question_index) or not 0 <= question_index < count:
            raise OutOfRangeError(
                f"Question index {question_index!r} is outside 0..{count - 1}."
            )
        return question_index


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
