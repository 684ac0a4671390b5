"""Utilities for exporting quizzes to the plain-text format used for imports.

Question ids are not part of the format: an exported quiz re-imports with ids
renumbered to 1-based positions. Continuation lines are indented so text that
looks like a marker (for example dialogue lines such as "A: Hola") stays in
its section. Each line is written stripped and blank lines are dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lingua_quiz.core.models import Question, QuizDefinition, format_percent
from lingua_quiz.core.quiz_importer import OPTION_LETTERS

logger = logging.getLogger(__name__)

_CONTINUATION_INDENT = "  "


class QuizExportError(ValueError):
    """Raised when a quiz cannot be expressed in the text format."""


def save_quiz_to_file(file_path: Path, definition: QuizDefinition) -> None:
    """Persist the quiz to disk in the text import format."""

    text = serialize_definition(definition)
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")
    logger.info("Exported %d questions to %s", definition.question_count, file_path)


def serialize_definition(definition: QuizDefinition) -> str:
    renumbered = [
        question.id
        for position, question in enumerate(definition.questions, start=1)
        if question.id != position
    ]
    if renumbered:
        logger.warning(
            "Question ids %s are not stored in the text format; they re-import as positions",
            renumbered,
        )

    blocks = [_serialize_header(definition)]
    blocks.extend(
        _serialize_question(question, position)
        for position, question in enumerate(definition.questions, start=1)
    )
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_header(definition: QuizDefinition) -> str:
    lines = _prefixed_lines("TITLE", definition.title)
    if definition.description:
        lines.extend(_prefixed_lines("DESCRIPTION", definition.description))
    lines.append(f"TIMELIMIT: {definition.time_limit_seconds}")
    lines.append(f"PASS: {format_percent(definition.pass_threshold_percent)}")
    return "\n".join(lines)


def _serialize_question(question: Question, position: int) -> str:
    if question.option_count > len(OPTION_LETTERS):
        raise QuizExportError(
            f"Question {position} ({question.id!r}) has {question.option_count} options; "
            f"the text format allows at most {len(OPTION_LETTERS)} (A-{OPTION_LETTERS[-1]})."
        )
    if not question.prompt.strip():
        raise QuizExportError(f"Question {position} ({question.id!r}) has no prompt text.")
    if any(not option.strip() for option in question.options):
        raise QuizExportError(f"Question {position} ({question.id!r}) has an empty option.")

    lines = _prefixed_lines("Q", question.prompt)
    for idx, option_text in enumerate(question.options):
        lines.extend(_prefixed_lines(OPTION_LETTERS[idx], option_text))
    lines.append(f"CORRECT: {OPTION_LETTERS[question.correct_option_index]}")
    if question.explanation:
        lines.extend(_prefixed_lines("EXPLANATION", question.explanation))
    return "\n".join(lines)


def _prefixed_lines(marker: str, text: str) -> list[str]:
    # Blank lines would split the block on re-import.
    text_lines = [line.strip() for line in text.splitlines() if line.strip()] or [""]
    return [
        f"{marker}: {text_lines[0]}",
        *(f"{_CONTINUATION_INDENT}{line}" for line in text_lines[1:]),
    ]
