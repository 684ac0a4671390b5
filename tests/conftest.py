import pytest

from lingua_quiz.core.models import Question, QuizDefinition
from lingua_quiz.core.quiz_engine import QuizEngine


def make_definition(question_count=5, time_limit_seconds=600, pass_threshold_percent=70, option_count=4):
    questions = tuple(
        Question(
            id=index + 1,
            prompt=f"Question {index + 1}?",
            options=tuple(f"Option {letter}" for letter in "ABCDEFGH"[:option_count]),
            correct_option_index=index % option_count,
            explanation=f"Because of rule {index + 1}.",
        )
        for index in range(question_count)
    )
    return QuizDefinition(
        questions=questions,
        time_limit_seconds=time_limit_seconds,
        pass_threshold_percent=pass_threshold_percent,
        title="Sample quiz",
    )


def wrong_option(question):
    return (question.correct_option_index + 1) % question.option_count


@pytest.fixture
def definition():
    return make_definition()


@pytest.fixture
def engine(definition):
    return QuizEngine(definition)


@pytest.fixture
def started_engine(engine):
    engine.start()
    return engine
