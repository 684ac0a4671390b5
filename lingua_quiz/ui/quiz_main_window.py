"""Qt main window switching between overview, question and results views."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMainWindow, QStackedWidget

from lingua_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from lingua_quiz.constants.ui_constants import (
    DEFAULT_FONT_SIZE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    NO_QUIZ_LOADED_MESSAGE,
    WINDOW_TITLE,
)
from lingua_quiz.core.errors import QuizEngineError
from lingua_quiz.core.models import QuizDefinition
from lingua_quiz.core.quiz_importer import QuizImportError, load_quiz_from_file
from lingua_quiz.core.quiz_runner import QuizRunner
from lingua_quiz.ui.components.intro_panel import IntroPanel
from lingua_quiz.ui.components.question_panel import QuestionPanel
from lingua_quiz.ui.components.results_panel import ResultsPanel
from lingua_quiz.ui.dialog_helpers import (
    confirm_abandon_attempt,
    show_error,
    show_info,
    show_warning,
)
from lingua_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)


class QuizView(Enum):
    """Which panel the learner currently sees."""

    INTRO = auto()
    QUESTION = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Hosts the quiz runner and acts as its timer host and presentation layer."""

    def __init__(self, runner: QuizRunner, font_size: int = DEFAULT_FONT_SIZE) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.runner = runner
        self._font_size = font_size
        self._view = QuizView.INTRO
        self._last_import_dir: Path = Path.home()

        self._build_ui()
        self._apply_styles()
        if self.runner.has_definition():
            self._show_definition(self.runner.definition)

    def _build_ui(self) -> None:
        self.view_stack = QStackedWidget(self)
        self.setCentralWidget(self.view_stack)

        self.intro_panel = IntroPanel(
            on_start=self._handle_start,
            on_import=self._handle_import_quiz,
            on_about=self._handle_about,
            on_help=self._handle_help,
            parent=self,
        )
        self.question_panel = QuestionPanel(
            self.runner,
            on_finished=self._handle_attempt_finished,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_retake=self._handle_retake,
            on_back=self._handle_back,
            parent=self,
        )

        self.view_stack.addWidget(self.intro_panel)
        self.view_stack.addWidget(self.question_panel)
        self.view_stack.addWidget(self.results_panel)
        self._set_view(QuizView.INTRO)

    def _set_view(self, view: QuizView) -> None:
        self._view = view
        index_map = {
            QuizView.INTRO: 0,
            QuizView.QUESTION: 1,
            QuizView.RESULTS: 2,
        }
        self.view_stack.setCurrentIndex(index_map[view])

    def _show_definition(self, definition: QuizDefinition) -> None:
        self.intro_panel.show_definition(definition)
        self.setWindowTitle(f"{WINDOW_TITLE} · {definition.title}")

    # --- Attempt flow ---

    def _handle_start(self) -> None:
        if not self.runner.has_definition():
            show_warning(self, "No quiz", NO_QUIZ_LOADED_MESSAGE)
            return
        self._begin_attempt(retake=False)

    def _handle_retake(self) -> None:
        self._begin_attempt(retake=True)

    def _begin_attempt(self, retake: bool) -> None:
        try:
            if retake:
                self.runner.retake()
            else:
                self.runner.begin()
        except QuizEngineError as exc:
            logger.exception("Could not start attempt")
            show_error(self, "Quiz error", str(exc))
            return
        self._set_view(QuizView.QUESTION)
        self.question_panel.start_attempt()

    def _handle_attempt_finished(self) -> None:
        try:
            result = self.runner.result()
        except QuizEngineError as exc:
            logger.exception("Attempt finished without a result")
            show_error(self, "Quiz error", str(exc))
            self._set_view(QuizView.INTRO)
            return
        self.results_panel.show_result(self.runner.definition, result)
        self._set_view(QuizView.RESULTS)

    def _handle_back(self) -> None:
        self._set_view(QuizView.INTRO)

    # --- Import / About / Help ---

    def _handle_import_quiz(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(self._last_import_dir),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = load_quiz_from_file(Path(file_path))
        except (OSError, QuizImportError) as exc:
            logger.warning("Import of %s failed: %s", file_path, exc)
            show_error(self, "Import failed", str(exc))
            return

        self._last_import_dir = Path(file_path).parent
        self.runner.load_definition(imported.definition)
        self._show_definition(imported.definition)
        self._set_view(QuizView.INTRO)
        show_info(
            self,
            "Quiz loaded",
            f"Loaded {imported.definition.question_count} questions from {imported.source_path.name}.",
        )

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.intro_panel.apply_font_size(self._font_size)
        self.question_panel.apply_font_size(self._font_size)
        self.results_panel.apply_font_size(self._font_size)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        if self._view == QuizView.QUESTION and self.runner.has_active_attempt():
            if not confirm_abandon_attempt(self):
                event.ignore()
                return
            logger.info("Attempt %d abandoned", self.runner.attempt_number)
        self.question_panel.stop_attempt()
        event.accept()
