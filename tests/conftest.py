import pytest

from helpers.factories import build_question_set

from survey_engine.questions import QuestionStore


@pytest.fixture(scope="session")
def bundled_questions():
    """The bundled five-question survey, loaded once."""
    return QuestionStore().load()


@pytest.fixture
def two_questions():
    return build_question_set(2)


@pytest.fixture
def make_questions():
    return build_question_set
