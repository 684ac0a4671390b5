"""Component shown before an attempt starts."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from lingua_quiz.constants.ui_constants import (
    INTRO_ABOUT_BUTTON,
    INTRO_HELP_BUTTON,
    INTRO_IMPORT_BUTTON,
    INTRO_RULES,
    INTRO_START_BUTTON,
    INTRO_SUMMARY_TEMPLATE,
    NO_QUIZ_LOADED_MESSAGE,
)
from lingua_quiz.core.models import QuizDefinition, format_percent
from lingua_quiz.styling.styles import Styles


class IntroPanel(QWidget):
    """Quiz overview with the rules and the start button."""

    def __init__(
        self,
        on_start: callable,
        on_import: callable,
        on_about: callable,
        on_help: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_import = on_import
        self.on_about = on_about
        self.on_help = on_help
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(NO_QUIZ_LOADED_MESSAGE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel("", self)
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.description_label)

        self.summary_label = QLabel("", self)
        self.summary_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.summary_label)

        self.rules_label = QLabel("", self)
        self.rules_label.setWordWrap(True)
        layout.addWidget(self.rules_label, stretch=1)

        button_row = QHBoxLayout()
        self.start_button = QPushButton(INTRO_START_BUTTON, self)
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self.on_start)
        button_row.addWidget(self.start_button)

        self.import_button = QPushButton(INTRO_IMPORT_BUTTON, self)
        self.import_button.clicked.connect(self.on_import)
        button_row.addWidget(self.import_button)

        self.about_button = QPushButton(INTRO_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(INTRO_HELP_BUTTON, self)
        self.help_button.clicked.connect(self.on_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def show_definition(self, definition: QuizDefinition) -> None:
        threshold = format_percent(definition.pass_threshold_percent)
        minutes = max(1, round(definition.time_limit_seconds / 60))
        self.title_label.setText(definition.title)
        self.description_label.setText(definition.description)
        self.description_label.setVisible(bool(definition.description))
        self.summary_label.setText(
            INTRO_SUMMARY_TEMPLATE.format(
                count=definition.question_count,
                minutes=minutes,
                threshold=threshold,
            )
        )
        self.rules_label.setText(INTRO_RULES.format(threshold=threshold))
        self.start_button.setEnabled(True)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for widget in (self.description_label, self.summary_label, self.rules_label, self.start_button):
            widget.setStyleSheet(style)
