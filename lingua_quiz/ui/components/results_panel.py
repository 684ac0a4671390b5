"""Component showing the score and the answer review."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from lingua_quiz.constants.ui_constants import (
    BACK_BUTTON,
    DEFAULT_FONT_SIZE,
    RESULT_FAILED_HEADLINE,
    RESULT_FAILED_HINT,
    RESULT_PASSED_HEADLINE,
    RESULT_SUMMARY_TEMPLATE,
    RESULT_TIMEOUT_NOTE,
    RETAKE_BUTTON,
)
from lingua_quiz.core.models import QuizDefinition, QuizResult, format_percent
from lingua_quiz.core.question_renderer import render_review
from lingua_quiz.core.quiz_runner import format_clock
from lingua_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """Pass/fail summary, per-question review, retake and back buttons."""

    def __init__(
        self,
        on_retake: callable,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_retake = on_retake
        self.on_back = on_back
        self._font_size: int = DEFAULT_FONT_SIZE
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel("", self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.headline_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.summary_label = QLabel("", self)
        self.summary_label.setAlignment(Qt.AlignCenter)
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.review_view = QWebEngineView(self)
        layout.addWidget(self.review_view, stretch=1)

        button_row = QHBoxLayout()
        self.retake_button = QPushButton(RETAKE_BUTTON, self)
        self.retake_button.clicked.connect(self.on_retake)
        button_row.addWidget(self.retake_button)

        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        button_row.addWidget(self.back_button)
        layout.addLayout(button_row)

    def show_result(self, definition: QuizDefinition, result: QuizResult) -> None:
        if result.passed:
            self.headline_label.setText(RESULT_PASSED_HEADLINE)
        else:
            self.headline_label.setText(
                f"{RESULT_FAILED_HEADLINE}\n"
                + RESULT_FAILED_HINT.format(threshold=format_percent(definition.pass_threshold_percent))
            )
        self.headline_label.setStyleSheet(Styles.get_headline_style(result.passed))

        self.score_label.setText(f"{result.score_percent}%")
        summary = RESULT_SUMMARY_TEMPLATE.format(
            correct=result.correct_count,
            count=result.question_count,
            time_taken=format_clock(result.time_taken_seconds),
        )
        if result.auto_submitted:
            summary = f"{summary}\n{RESULT_TIMEOUT_NOTE}"
        self.summary_label.setText(summary)
        self.review_view.setHtml(render_review(definition, result, self._font_size))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        style = f"font-size: {font_size}pt;"
        for widget in (self.summary_label, self.retake_button, self.back_button):
            widget.setStyleSheet(style)
