"""Session controller between the quiz engine and the learner UI.

The engine permits free navigation and scoring; the policies a learner sees
(Next disabled until the current question is answered, dot colours, the
warning window near the end of the countdown, retakes) live here so the UI
stays a thin view.
"""

from __future__ import annotations

from enum import Enum, auto
import logging

from lingua_quiz.constants.quiz_constants import TIME_WARNING_WINDOW_SECONDS
from lingua_quiz.core.errors import InvalidStateError
from lingua_quiz.core.models import Question, QuizDefinition, QuizResult, QuizState
from lingua_quiz.core.quiz_engine import QuizEngine

logger = logging.getLogger(__name__)


class DotState(Enum):
    """Visual state of a numbered navigation button."""

    CURRENT = auto()
    ANSWERED = auto()
    UNANSWERED = auto()


def format_clock(seconds: int) -> str:
    """Format seconds as ``m:ss``."""
    minutes, remainder = divmod(max(0, seconds), 60)
    return f"{minutes}:{remainder:02d}"


class QuizRunner:
    """Owns the loaded definition and the engine of the current attempt."""

    def __init__(
        self,
        definition: QuizDefinition | None = None,
        warning_window_seconds: int = TIME_WARNING_WINDOW_SECONDS,
    ) -> None:
        self._definition = definition
        self._engine: QuizEngine | None = None
        self._attempt_number = 0
        self._warning_window_seconds = warning_window_seconds

    # --- Definition ---

    def load_definition(self, definition: QuizDefinition) -> None:
        """Replace the quiz; any attempt in progress is discarded."""
        self._definition = definition
        self._engine = None
        self._attempt_number = 0
        logger.info("Loaded quiz '%s' (%d questions)", definition.title, definition.question_count)

    def has_definition(self) -> bool:
        return self._definition is not None

    @property
    def definition(self) -> QuizDefinition:
        if self._definition is None:
            raise InvalidStateError("No quiz definition is loaded.")
        return self._definition

    @property
    def engine(self) -> QuizEngine:
        if self._engine is None:
            raise InvalidStateError("No attempt has been started.")
        return self._engine

    @property
    def attempt_number(self) -> int:
        return self._attempt_number

    # --- Attempts ---

    def begin(self) -> QuizEngine:
        """Start a fresh attempt on the loaded definition."""
        engine = QuizEngine(self.definition)
        engine.start()
        self._engine = engine
        self._attempt_number += 1
        logger.debug("Attempt %d started", self._attempt_number)
        return engine

    def retake(self) -> QuizEngine:
        """Discard the previous attempt and start a new one on the same quiz."""
        if self._engine is not None and not self._engine.is_submitted:
            logger.warning("Retake requested while attempt %d was still running", self._attempt_number)
        return self.begin()

    def has_active_attempt(self) -> bool:
        return self._engine is not None and not self._engine.is_submitted

    # --- Delegation ---

    def state(self) -> QuizState:
        return self.engine.get_state()

    def current_question(self) -> Question:
        return self.definition.questions[self.state().current_question_index]

    def select_answer(self, option_index: int) -> None:
        """Answer the question currently shown."""
        self.engine.select_answer(self.state().current_question_index, option_index)

    def go_to_question(self, index: int) -> None:
        self.engine.go_to_question(index)

    def go_next(self) -> None:
        if not self.can_advance():
            raise InvalidStateError("Answer the current question before moving on.")
        self.engine.next_question()

    def go_back(self) -> None:
        self.engine.previous_question()

    def tick(self, elapsed_seconds: int = 1) -> int:
        return self.engine.tick(elapsed_seconds)

    def submit(self) -> QuizResult:
        return self.engine.submit()

    def result(self) -> QuizResult:
        return self.engine.get_result()

    # --- Presentation policy ---

    def can_advance(self) -> bool:
        state = self.state()
        return state.is_answered(state.current_question_index)

    def can_go_back(self) -> bool:
        return self.state().current_question_index > 0

    def is_last_question(self) -> bool:
        return self.state().current_question_index == self.definition.question_count - 1

    def answered_count(self) -> int:
        return len(self.state().selected_answers)

    def unanswered_count(self) -> int:
        return self.definition.question_count - self.answered_count()

    def dot_states(self) -> list[DotState]:
        state = self.state()
        states: list[DotState] = []
        for index in range(self.definition.question_count):
            if index == state.current_question_index:
                states.append(DotState.CURRENT)
            elif state.is_answered(index):
                states.append(DotState.ANSWERED)
            else:
                states.append(DotState.UNANSWERED)
        return states

    def progress_fraction(self) -> float:
        return (self.state().current_question_index + 1) / self.definition.question_count

    def is_time_warning(self) -> bool:
        remaining = self.state().remaining_seconds
        return 0 < remaining <= self._warning_window_seconds

    def format_remaining(self) -> str:
        return format_clock(self.state().remaining_seconds)
