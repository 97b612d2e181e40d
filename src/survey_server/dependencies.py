"""FastAPI dependency injection — provides the loaded question set.

The question set is loaded once in the lifespan handler and stashed on
``app.state``.  No session state is kept on the server: each request builds
a throwaway ``SurveyEngine`` from the state the client sent.
"""

from fastapi import Request

from survey_engine.models.question import QuestionSet


def get_questions(request: Request) -> QuestionSet:
    """Return the QuestionSet singleton from ``app.state``."""
    return request.app.state.questions
