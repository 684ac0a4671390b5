"""Utilities for importing quizzes from a human-friendly text file.

File format: an optional header block followed by question blocks. Blocks are
separated by blank lines or '---'.

    TITLE: Quiz title                       (optional)
    DESCRIPTION: Shown before the quiz      (optional, may continue on next lines)
    TIMELIMIT: seconds for the whole quiz   (optional, defaults to 600)
    PASS: minimum percentage to pass        (optional, defaults to 70)

    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    ...                                     (two to eight options, A-H)
    CORRECT: letter of the correct option
    EXPLANATION: Shown in the review after submission (optional)

Indented lines always continue the previous section, even when they look like
a marker, so dialogue such as "  A: Hola" can stay inside a question.

Example:

    TITLE: Spanish Basics Quiz
    TIMELIMIT: 600
    PASS: 70

    Q: Which of the following means 'Thank you' in Spanish?
    A: Por favor
    B: Gracias
    C: De nada
    D: Perdón
    CORRECT: B
    EXPLANATION: 'Gracias' means 'thank you'.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from lingua_quiz.constants.quiz_constants import (
    DEFAULT_PASS_THRESHOLD_PERCENT,
    DEFAULT_QUIZ_PATH,
    DEFAULT_QUIZ_TITLE,
    DEFAULT_TIME_LIMIT_SECONDS,
)
from lingua_quiz.core.errors import QuizDefinitionError
from lingua_quiz.core.models import Question, QuizDefinition

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for an imported quiz and where it came from."""

    source_path: Path
    definition: QuizDefinition


OPTION_LETTERS = "ABCDEFGH"
_HEADER_KEYS = ("TITLE", "DESCRIPTION", "TIMELIMIT", "PASS")
_TEXT_HEADER_KEYS = ("TITLE", "DESCRIPTION")


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    definition = parse_quiz_text(text)
    logger.info("Imported %d questions from %s", definition.question_count, file_path)
    return ImportedQuiz(source_path=file_path, definition=definition)


def load_default_quiz() -> ImportedQuiz:
    """Load the quiz bundled with the package."""
    return load_quiz_from_file(DEFAULT_QUIZ_PATH)


def parse_quiz_text(text: str) -> QuizDefinition:
    blocks = _split_blocks(text)
    if not blocks:
        raise QuizImportError("Quiz file did not contain any questions.")

    header: dict[str, str] = {}
    if not _is_question_block(blocks[0]):
        header = _parse_header(blocks[0])
        blocks = blocks[1:]

    questions = [_parse_block(block, position) for position, block in enumerate(blocks, start=1)]
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")

    try:
        return QuizDefinition(
            questions=tuple(questions),
            time_limit_seconds=_parse_positive_int(
                header.get("TIMELIMIT"), "TIMELIMIT", DEFAULT_TIME_LIMIT_SECONDS
            ),
            pass_threshold_percent=_parse_threshold(header.get("PASS")),
            title=header.get("TITLE") or DEFAULT_QUIZ_TITLE,
            description=header.get("DESCRIPTION", ""),
        )
    except QuizDefinitionError as exc:
        raise QuizImportError(str(exc)) from exc


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---" and not (current_block and _is_indented(raw_line)):
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _is_question_block(block: str) -> bool:
    return any(
        line.strip().upper().startswith("Q:")
        for line in block.splitlines()
        if not _is_indented(line)
    )


def _is_indented(raw_line: str) -> bool:
    return raw_line[:1].isspace()


def _parse_header(block: str) -> dict[str, str]:
    header: dict[str, str] = {}
    current_key: str | None = None
    for raw_line in block.splitlines():
        line = raw_line.strip()
        if _is_indented(raw_line) and current_key in _TEXT_HEADER_KEYS:
            header[current_key] = f"{header[current_key]}\n{line}".strip()
            continue
        key, separator, value = line.partition(":")
        key = key.strip().upper()
        if separator and key in _HEADER_KEYS:
            header[key] = value.strip()
            current_key = key
            continue
        if current_key == "DESCRIPTION":
            header["DESCRIPTION"] = f"{header['DESCRIPTION']}\n{line}".strip()
            continue
        raise QuizImportError(f"Unknown header line: '{line}'.")
    return header


def _parse_block(block: str, position: int) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    explanation_lines: list[str] = []
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if not (current_section is not None and _is_indented(raw_line)):
            if upper.startswith("Q:"):
                question_lines = [line[2:].strip()]
                current_section = "Q"
                continue

            if upper.startswith("CORRECT:"):
                correct_letter = line.split(":", 1)[1].strip().upper()
                current_section = None
                continue

            if upper.startswith("EXPLANATION:"):
                explanation_lines = [line.split(":", 1)[1].strip()]
                current_section = "EXPLANATION"
                continue

            if upper.split(":", 1)[0] in _HEADER_KEYS and ":" in line:
                raise QuizImportError(
                    f"Question {position}: '{line.split(':', 1)[0]}' belongs in the header block."
                )

            if len(line) >= 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
                letter = line[0].upper()
                options[letter] = line[2:].strip()
                current_section = letter
                continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Question {position}: encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError(f"Question {position}: question text missing (Q: ...)")

    expected_letters = OPTION_LETTERS[: len(options)]
    if len(options) < 2:
        raise QuizImportError(f"Question {position}: at least two options (A, B) are required.")
    if set(options) != set(expected_letters):
        raise QuizImportError(
            f"Question {position}: options must be lettered contiguously from A "
            f"(expected {', '.join(expected_letters)})."
        )

    option_list = [options[letter].strip() for letter in expected_letters]
    if any(not option for option in option_list):
        raise QuizImportError(f"Question {position}: option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError(f"Question {position}: CORRECT line is required.")
    if correct_letter not in expected_letters:
        raise QuizImportError(
            f"Question {position}: CORRECT must be one of {', '.join(expected_letters)}."
        )

    try:
        return Question(
            id=position,
            prompt=question_text,
            options=tuple(option_list),
            correct_option_index=expected_letters.index(correct_letter),
            explanation="\n".join(explanation_lines).strip(),
        )
    except QuizDefinitionError as exc:
        raise QuizImportError(str(exc)) from exc


def _parse_positive_int(raw_value: str | None, name: str, default: int) -> int:
    if raw_value is None:
        return default
    try:
        parsed_value = int(raw_value)
    except ValueError as exc:
        raise QuizImportError(f"{name} must be an integer number of seconds.") from exc
    if parsed_value <= 0:
        raise QuizImportError(f"{name} must be a positive integer.")
    return parsed_value


def _parse_threshold(raw_value: str | None) -> float:
    if raw_value is None:
        return DEFAULT_PASS_THRESHOLD_PERCENT
    cleaned = raw_value.rstrip("%").strip()
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise QuizImportError("PASS must be a number between 0 and 100.") from exc
    if value.is_integer():
        return int(value)
    return value
