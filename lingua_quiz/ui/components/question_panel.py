"""Component for answering questions while the countdown runs."""

from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from lingua_quiz.constants.quiz_constants import TICK_INTERVAL_MS
from lingua_quiz.constants.ui_constants import (
    DEFAULT_FONT_SIZE,
    NEXT_BUTTON,
    PREVIOUS_BUTTON,
    QUESTION_POSITION_TEMPLATE,
    SUBMIT_BUTTON,
)
from lingua_quiz.core.errors import QuizEngineError
from lingua_quiz.core.models import option_letter
from lingua_quiz.core.question_renderer import render_question_with_options
from lingua_quiz.core.quiz_runner import QuizRunner
from lingua_quiz.ui.dialog_helpers import confirm_submit, show_error
from lingua_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)


class QuestionPanel(QWidget):
    """Drives the countdown and shows the current question of an attempt."""

    def __init__(
        self,
        runner: QuizRunner,
        on_finished: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.runner = runner
        self.on_finished = on_finished
        self._font_size: int = DEFAULT_FONT_SIZE
        self._option_buttons: list[QPushButton] = []
        self._dot_buttons: list[QPushButton] = []

        self._build_ui()
        self._configure_tick_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.position_label = QLabel("", self)
        header_row.addWidget(self.position_label)
        header_row.addStretch()
        self.timer_label = QLabel("", self)
        self.timer_label.setStyleSheet(Styles.get_timer_style(warning=False))
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        nav_row = QHBoxLayout()
        self.previous_button = QPushButton(PREVIOUS_BUTTON, self)
        self.previous_button.clicked.connect(self._handle_previous)
        nav_row.addWidget(self.previous_button)

        nav_row.addStretch()
        self.dots_layout = QHBoxLayout()
        nav_row.addLayout(self.dots_layout)
        nav_row.addStretch()

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next_or_submit)
        nav_row.addWidget(self.next_button)
        layout.addLayout(nav_row)

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._handle_tick)

    # --- Attempt lifecycle ---

    def start_attempt(self) -> None:
        """Build widgets for the current attempt and start the countdown."""
        self._rebuild_dots()
        self._refresh()
        self.tick_timer.start()

    def stop_attempt(self) -> None:
        if self.tick_timer.isActive():
            self.tick_timer.stop()

    def _finish(self) -> None:
        self.stop_attempt()
        self.on_finished()

    def _handle_tick(self) -> None:
        if not self.runner.has_active_attempt():
            self.stop_attempt()
            return
        try:
            self.runner.tick()
        except QuizEngineError:
            logger.exception("Countdown tick rejected")
            self.stop_attempt()
            return
        if self.runner.engine.is_submitted:
            self._finish()
            return
        self._update_timer_label()

    # --- User actions ---

    def _handle_option_clicked(self, option_index: int) -> None:
        try:
            self.runner.select_answer(option_index)
        except QuizEngineError as exc:
            show_error(self, "Answer rejected", str(exc))
            return
        self._refresh()

    def _handle_dot_clicked(self, question_index: int) -> None:
        try:
            self.runner.go_to_question(question_index)
        except QuizEngineError as exc:
            show_error(self, "Navigation failed", str(exc))
            return
        self._refresh()

    def _handle_previous(self) -> None:
        if not self.runner.can_go_back():
            return
        self.runner.go_back()
        self._refresh()

    def _handle_next_or_submit(self) -> None:
        if not self.runner.can_advance():
            return
        if not self.runner.is_last_question():
            self.runner.go_next()
            self._refresh()
            return
        if not confirm_submit(self, self.runner.unanswered_count()):
            return
        if not self.runner.has_active_attempt():
            # Countdown expired while the dialog was open; the tick already finished it.
            return
        self.runner.submit()
        self._finish()

    # --- Rendering ---

    def _refresh(self) -> None:
        state = self.runner.state()
        definition = self.runner.definition
        index = state.current_question_index
        public_question = definition.public_questions()[index]
        selected = state.selected_answers.get(index)

        self.position_label.setText(
            QUESTION_POSITION_TEMPLATE.format(number=index + 1, count=definition.question_count)
        )
        self.progress_bar.setValue(int(self.runner.progress_fraction() * 1000))
        self.question_view.setHtml(
            render_question_with_options(public_question, selected, self._font_size)
        )
        self._rebuild_option_buttons(public_question.options, selected)
        self._update_dots()
        self._update_timer_label()

        self.previous_button.setEnabled(self.runner.can_go_back())
        self.next_button.setText(SUBMIT_BUTTON if self.runner.is_last_question() else NEXT_BUTTON)
        self.next_button.setEnabled(self.runner.can_advance())

    def _rebuild_option_buttons(self, options: tuple[str, ...], selected: int | None) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self._option_buttons = []
        for idx, option in enumerate(options):
            button = QPushButton(f"{option_letter(idx)}. {option}", self)
            button.setCheckable(True)
            button.setChecked(idx == selected)
            button.setStyleSheet(f"font-size: {self._font_size}pt; text-align: left;")
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_option_clicked(i))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def _rebuild_dots(self) -> None:
        while self.dots_layout.count():
            item = self.dots_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self._dot_buttons = []
        for idx in range(self.runner.definition.question_count):
            dot = QPushButton(str(idx + 1), self)
            dot.setFixedWidth(36)
            dot.clicked.connect(lambda _checked=False, i=idx: self._handle_dot_clicked(i))
            self.dots_layout.addWidget(dot)
            self._dot_buttons.append(dot)

    def _update_dots(self) -> None:
        for dot, dot_state in zip(self._dot_buttons, self.runner.dot_states()):
            dot.setStyleSheet(Styles.get_dot_style(dot_state.name))

    def _update_timer_label(self) -> None:
        self.timer_label.setText(f"⏱ {self.runner.format_remaining()}")
        self.timer_label.setStyleSheet(Styles.get_timer_style(warning=self.runner.is_time_warning()))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        style = f"font-size: {font_size}pt;"
        for widget in (self.position_label, self.previous_button, self.next_button):
            widget.setStyleSheet(style)
