"""Session endpoints — start, view, answer and reset a survey session.

The widget keeps the ``SessionState`` in the page and sends it with every
request; the server rebuilds an engine from it, applies the transition and
returns the new state alongside the view to render.  A state that does not
fit the loaded question set is rejected with 409.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from survey_engine.engine import SurveyEngine
from survey_engine.models.question import QuestionSet
from survey_engine.models.session import SessionState, StepResult

from survey_server.dependencies import get_questions

router = APIRouter(tags=["session"])


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class StateRequest(BaseModel):
    """Body carrying the client's current session state."""
    state: SessionState


class AnswerRequest(BaseModel):
    """Body for POST /session/answer.

    ``option`` is stored as-is; it is not checked against the listed options.
    """
    state: SessionState
    option: str


class SessionResponse(BaseModel):
    """New session state plus the step the widget should render."""
    state: SessionState
    step: StepResult = Field(discriminator="type")


def _respond(engine: SurveyEngine) -> SessionResponse:
    return SessionResponse(state=engine.state, step=engine.view())


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/session")
def start_session(questions: QuestionSet = Depends(get_questions)) -> SessionResponse:
    """Start a new session at the first question."""
    return _respond(SurveyEngine(questions))


@router.post("/session/current")
def current_step(
    body: StateRequest,
    questions: QuestionSet = Depends(get_questions),
) -> SessionResponse:
    """Return the view for the given state without changing it."""
    return _respond(SurveyEngine(questions, body.state))


@router.post("/session/answer")
def submit_answer(
    body: AnswerRequest,
    questions: QuestionSet = Depends(get_questions),
) -> SessionResponse:
    """Record an answer for the current question and advance.

    Returns 409 if the state is already complete.
    """
    engine = SurveyEngine(questions, body.state)
    engine.submit_answer(body.option)
    return _respond(engine)


@router.post("/session/reset")
def reset_session(questions: QuestionSet = Depends(get_questions)) -> SessionResponse:
    """Restart the survey: back to the first question with no answers."""
    engine = SurveyEngine(questions)
    engine.reset()
    return _respond(engine)
