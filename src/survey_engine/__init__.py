"""survey_engine — multiple-choice survey SDK.

Public API:
    SurveyEngine       — the progression state machine (submit, reset, progress)
    QuestionStore      — loads a YAML question file into a QuestionSet
    build_step         — projects (QuestionSet, SessionState) onto a StepResult

Models:
    Question           — immutable multiple-choice question
    QuestionSet        — ordered, read-only collection of questions
    SessionState       — position, answers and completion flag of a session
    Progress           — current/total with ratio and percent
    QuestionStep       — step: show the current question
    ResultsStep        — step: survey complete, show the answers
    StepResult         — union of both step types

Errors:
    SurveyError, ConfigurationError, InvalidStateError
"""

from survey_engine.engine import SurveyEngine
from survey_engine.errors import ConfigurationError, InvalidStateError, SurveyError
from survey_engine.models import (
    AnsweredQuestion,
    Progress,
    Question,
    QuestionPayload,
    QuestionSet,
    QuestionStep,
    ResultsStep,
    SessionState,
    StepResult,
)
from survey_engine.questions import QuestionStore
from survey_engine.view import build_step

__version__ = "0.1.0"

__all__ = [
    # Engine & store
    "SurveyEngine",
    "QuestionStore",
    "build_step",
    # Models
    "AnsweredQuestion",
    "Progress",
    "Question",
    "QuestionPayload",
    "QuestionSet",
    "QuestionStep",
    "ResultsStep",
    "SessionState",
    "StepResult",
    # Errors
    "SurveyError",
    "ConfigurationError",
    "InvalidStateError",
]
