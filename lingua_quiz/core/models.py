"""Domain models for timed quizzes and their scored results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Hashable, Mapping

from lingua_quiz.core.errors import QuizDefinitionError

_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def option_letter(index: int) -> str:
    """Return the display letter for an option index (0 -> A, 1 -> B, ...)."""
    if 0 <= index < len(_LETTERS):
        return _LETTERS[index]
    return str(index + 1)


class QuizStatus(Enum):
    """Lifecycle status of a single quiz attempt."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    SUBMITTED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option."""

    id: Hashable
    prompt: str
    options: tuple[str, ...]
    correct_option_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        try:
            hash(self.id)
        except TypeError as exc:
            raise QuizDefinitionError(
                f"Question id {self.id!r} must be hashable."
            ) from exc
        options = tuple(self.options)
        object.__setattr__(self, "options", options)
        if len(options) < 2:
            raise QuizDefinitionError(
                f"Question {self.id!r} must have at least two options, got {len(options)}."
            )
        if not _is_int(self.correct_option_index):
            raise QuizDefinitionError(
                f"Question {self.id!r}: correct option index must be an integer."
            )
        if not 0 <= self.correct_option_index < len(options):
            raise QuizDefinitionError(
                f"Question {self.id!r}: correct option index {self.correct_option_index} "
                f"is outside 0..{len(options) - 1}."
            )

    @property
    def option_count(self) -> int:
        return len(self.options)


@dataclass(frozen=True, slots=True)
class PublicQuestion:
    """Question view safe to hand to an untrusted renderer (no answer key)."""

    id: Hashable
    prompt: str
    options: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class QuizDefinition:
    """Immutable quiz: ordered questions, a total time budget and a pass mark."""

    questions: tuple[Question, ...]
    time_limit_seconds: int
    pass_threshold_percent: float
    title: str = "Untitled quiz"
    description: str = ""

    def __post_init__(self) -> None:
        questions = tuple(self.questions)
        object.__setattr__(self, "questions", questions)
        if not questions:
            raise QuizDefinitionError("Quiz must contain at least one question.")
        if not _is_int(self.time_limit_seconds) or self.time_limit_seconds <= 0:
            raise QuizDefinitionError("Time limit must be a positive integer number of seconds.")
        threshold = self.pass_threshold_percent
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise QuizDefinitionError("Pass threshold must be a number.")
        if not 0 <= threshold <= 100:
            raise QuizDefinitionError("Pass threshold must be between 0 and 100.")

        seen: set[Hashable] = set()
        for question in questions:
            if question.id in seen:
                raise QuizDefinitionError(f"Duplicate question id {question.id!r}.")
            seen.add(question.id)

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def public_questions(self) -> tuple[PublicQuestion, ...]:
        """Return the questions with answer keys and explanations stripped."""
        return tuple(
            PublicQuestion(id=question.id, prompt=question.prompt, options=question.options)
            for question in self.questions
        )


@dataclass(frozen=True, slots=True)
class QuizState:
    """Read-only progress snapshot for presentation layers."""

    status: QuizStatus
    current_question_index: int
    selected_answers: Mapping[int, int]
    remaining_seconds: int

    def is_answered(self, question_index: int) -> bool:
        return question_index in self.selected_answers


@dataclass(frozen=True, slots=True)
class QuestionOutcome:
    """Scored outcome of one question in a submitted attempt."""

    question_id: Hashable
    selected_option_index: int | None
    correct_option_index: int
    is_correct: bool

    @property
    def is_answered(self) -> bool:
        return self.selected_option_index is not None


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Frozen scoring output of a submitted attempt."""

    per_question: tuple[QuestionOutcome, ...]
    correct_count: int
    score_percent: int
    passed: bool
    time_taken_seconds: int
    auto_submitted: bool = field(default=False, compare=False)

    @property
    def question_count(self) -> int:
        return len(self.per_question)

    @property
    def unanswered_count(self) -> int:
        return sum(1 for outcome in self.per_question if not outcome.is_answered)

    @property
    def incorrect_count(self) -> int:
        return self.question_count - self.correct_count


def freeze_answers(answers: Mapping[int, int]) -> Mapping[int, int]:
    """Copy an answer mapping into a read-only view."""
    return MappingProxyType(dict(answers))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def format_percent(value: float) -> str:
    """Format a percentage without a trailing '.0' (70.0 -> '70', 62.5 -> '62.5')."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
