"""Reference endpoint — the loaded question set, read-only."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from survey_engine.models.question import QuestionSet
from survey_engine.models.session import QuestionPayload
from survey_engine.view import to_payload

from survey_server.dependencies import get_questions

router = APIRouter(tags=["questions"])


class QuestionListResponse(BaseModel):
    title: str | None = None
    total: int
    questions: list[QuestionPayload]


@router.get("/questions")
def list_questions(questions: QuestionSet = Depends(get_questions)) -> QuestionListResponse:
    """Return every question in survey order."""
    return QuestionListResponse(
        title=questions.title,
        total=questions.total,
        questions=[to_payload(q) for q in questions.questions],
    )
