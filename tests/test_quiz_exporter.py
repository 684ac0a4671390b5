"""
Tests for exporting quizzes back to the import format
"""

import pytest

from conftest import make_definition
from lingua_quiz.core.models import Question, QuizDefinition
from lingua_quiz.core.quiz_exporter import QuizExportError, save_quiz_to_file, serialize_definition
from lingua_quiz.core.quiz_importer import load_quiz_from_file, parse_quiz_text


def single_question_definition(**question_fields):
    fields = {"id": 1, "prompt": "Pick one", "options": ("a", "b"), "correct_option_index": 0}
    fields.update(question_fields)
    return QuizDefinition(
        questions=(Question(**fields),),
        time_limit_seconds=30,
        pass_threshold_percent=50,
        title="Single",
    )


class TestSerialize:
    """Text produced by the exporter."""

    def test_header_and_blocks(self):
        text = serialize_definition(make_definition(question_count=2, time_limit_seconds=90))
        blocks = text.strip().split("\n\n---\n\n")
        assert len(blocks) == 3
        assert blocks[0].splitlines() == ["TITLE: Sample quiz", "TIMELIMIT: 90", "PASS: 70"]
        assert blocks[1].splitlines()[0] == "Q: Question 1?"
        assert "CORRECT: A" in blocks[1]
        assert "CORRECT: B" in blocks[2]
        assert "EXPLANATION: Because of rule 2." in blocks[2]

    def test_fractional_threshold(self):
        text = serialize_definition(make_definition(pass_threshold_percent=62.5))
        assert "PASS: 62.5" in text

    def test_continuations_are_indented_and_blank_lines_dropped(self):
        definition = QuizDefinition(
            questions=(
                Question(id=1, prompt="Line one\n\nLine two", options=("a", "b"), correct_option_index=1),
            ),
            time_limit_seconds=30,
            pass_threshold_percent=50,
            description="First\n\nSecond",
        )
        text = serialize_definition(definition)
        assert "Q: Line one\n  Line two" in text
        assert "DESCRIPTION: First\n  Second" in text


class TestUnrepresentableQuizzes:
    """Definitions the text format cannot hold are rejected up front."""

    @pytest.mark.parametrize("option_count", [9, 17])
    def test_too_many_options(self, option_count):
        definition = single_question_definition(
            options=tuple(f"choice {n}" for n in range(option_count)),
            correct_option_index=option_count - 1,
        )
        with pytest.raises(QuizExportError, match="Question 1"):
            serialize_definition(definition)

    def test_export_error_is_value_error(self):
        definition = single_question_definition(options=tuple("abcdefghi"))
        with pytest.raises(ValueError):
            serialize_definition(definition)

    @pytest.mark.parametrize(
        "fields",
        [{"prompt": "   "}, {"options": ("a", "")}, {"options": ("a", "\n")}],
    )
    def test_empty_text_rejected(self, fields):
        with pytest.raises(QuizExportError):
            serialize_definition(single_question_definition(**fields))

    def test_nothing_written_on_error(self, tmp_path):
        target = tmp_path / "quiz.txt"
        definition = single_question_definition(options=tuple("abcdefghi"))
        with pytest.raises(QuizExportError):
            save_quiz_to_file(target, definition)
        assert not target.exists()

    def test_eight_options_still_export(self):
        definition = single_question_definition(options=tuple("abcdefgh"), correct_option_index=7)
        assert parse_quiz_text(serialize_definition(definition)) == definition


class TestRoundTrip:
    """Exported text imports back to an equal definition."""

    def test_parse_back(self):
        original = make_definition(question_count=3, option_count=5, pass_threshold_percent=62.5)
        restored = parse_quiz_text(serialize_definition(original))
        assert restored == original

    def test_dialogue_prompt(self):
        original = single_question_definition(
            prompt="Complete the dialogue:\nA: Hola\nB: ___",
            options=("Adios", "Hola"),
            correct_option_index=1,
        )
        restored = parse_quiz_text(serialize_definition(original))
        assert restored == original
        assert restored.questions[0].prompt == "Complete the dialogue:\nA: Hola\nB: ___"

    def test_marker_lines_in_every_section(self):
        original = QuizDefinition(
            questions=(
                Question(
                    id=1,
                    prompt="Read:\n---\nQ: Who?\nCORRECT: me",
                    options=("first\nB: still first", "second\nEXPLANATION: not one"),
                    correct_option_index=0,
                    explanation="Because\nA: it is\nTIMELIMIT: unrelated",
                ),
            ),
            time_limit_seconds=45,
            pass_threshold_percent=50,
            title="Markers\nPASS: 10",
            description="Intro\nTIMELIMIT: 5\nQ: not a question\nTITLE: other",
        )
        assert parse_quiz_text(serialize_definition(original)) == original

    def test_non_positional_ids_are_renumbered(self, caplog):
        original = QuizDefinition(
            questions=(
                Question(id="greet", prompt="Hello?", options=("Hola", "Adios"), correct_option_index=0),
                Question(id="thanks", prompt="Thanks?", options=("Gracias", "Nada"), correct_option_index=0),
            ),
            time_limit_seconds=60,
            pass_threshold_percent=50,
        )
        with caplog.at_level("WARNING", logger="lingua_quiz.core.quiz_exporter"):
            restored = parse_quiz_text(serialize_definition(original))
        assert "re-import as positions" in caplog.text
        assert [q.id for q in restored.questions] == [1, 2]
        assert [q.prompt for q in restored.questions] == ["Hello?", "Thanks?"]

    def test_positional_ids_log_nothing(self, caplog):
        with caplog.at_level("WARNING", logger="lingua_quiz.core.quiz_exporter"):
            serialize_definition(make_definition())
        assert caplog.text == ""

    def test_save_and_load(self, tmp_path):
        original = make_definition()
        target = tmp_path / "nested" / "quiz.txt"
        save_quiz_to_file(target, original)
        assert target.exists()
        assert load_quiz_from_file(target).definition == original
