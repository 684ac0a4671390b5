"""Application entry point for LinguaQuiz."""

from __future__ import annotations

import os
import sys

from PySide6.QtWidgets import QApplication

from lingua_quiz.constants.quiz_constants import LOG_LEVEL_ENV_VAR
from lingua_quiz.core.quiz_importer import QuizImportError, load_default_quiz
from lingua_quiz.core.quiz_runner import QuizRunner
from lingua_quiz.ui.quiz_main_window import QuizMainWindow
from lingua_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the bundled quiz, and launch the Qt UI."""
    logger = configure_logging(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO"))
    logger.info("Starting LinguaQuiz…")

    runner = QuizRunner()
    try:
        runner.load_definition(load_default_quiz().definition)
    except (OSError, QuizImportError):
        logger.exception("Bundled quiz could not be loaded; waiting for an import")

    app = QApplication(sys.argv)
    window = QuizMainWindow(runner=runner)
    window.resize(900, 700)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
