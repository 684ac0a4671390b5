"""Qt UI components for the learner application."""

from .dialog_helpers import (
    confirm_abandon_attempt,
    confirm_submit,
    show_error,
    show_info,
    show_warning,
)
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_abandon_attempt",
    "confirm_submit",
    "show_error",
    "show_info",
    "show_warning",
]
