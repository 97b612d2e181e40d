"""Public model re-exports for survey_engine.

Consumers should import from ``survey_engine.models`` rather than reaching
into sub-modules directly.
"""

# --- Questions ---
from survey_engine.models.question import Question, QuestionSet

# --- Session / step ---
from survey_engine.models.session import (
    AnsweredQuestion,
    Progress,
    QuestionPayload,
    QuestionStep,
    ResultsStep,
    SessionState,
    StepResult,
)

__all__ = [
    # Questions
    "Question",
    "QuestionSet",
    # Session
    "AnsweredQuestion",
    "Progress",
    "QuestionPayload",
    "QuestionStep",
    "ResultsStep",
    "SessionState",
    "StepResult",
]
