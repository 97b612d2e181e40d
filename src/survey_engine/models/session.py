"""Session and step models — the contract between the engine and renderers.

``SessionState`` is the value the engine transitions; every other model here
is a read-only projection of it that a renderer (web widget, terminal) can
draw without knowing anything about the engine.

Step types:
  - QuestionStep: show the current question with progress
  - ResultsStep: survey complete, show the collected answers

The ``StepResult`` union covers both cases so renderers can dispatch on
``type``.
"""

from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_serializer,
    field_validator,
)


class SessionState(BaseModel):
    """Position, answers and completion flag of one survey session.

    Frozen: transitions build a new value instead of editing this one.
    ``answers`` maps question id to the selected option text and is held as
    a read-only mapping; it serialises as a plain dict.  When ``complete``
    is set the index stays on the last question.
    """

    model_config = ConfigDict(frozen=True)

    current_index: int = Field(0, ge=0)
    answers: dict[int, str] = Field(default_factory=dict, validate_default=True)
    complete: bool = False

    @field_validator("answers")
    @classmethod
    def freeze_answers(cls, answers: dict[int, str]) -> Mapping[int, str]:
        return MappingProxyType(dict(answers))

    @field_serializer("answers")
    def dump_answers(self, answers: Mapping[int, str]) -> dict[int, str]:
        return dict(answers)


class Progress(BaseModel):
    """How far through the survey the session is."""

    current: int
    total: int

    @computed_field
    @property
    def ratio(self) -> float:
        """``current / total`` in [0, 1]."""
        return self.current / self.total

    @computed_field
    @property
    def percent(self) -> float:
        return self.ratio * 100


class QuestionPayload(BaseModel):
    """Flattened question for renderers."""

    id: int
    prompt: str
    image: Optional[str] = None
    options: list[str]


class AnsweredQuestion(BaseModel):
    """One row of the results summary."""

    id: int
    prompt: str
    answer: Optional[str] = None


class QuestionStep(BaseModel):
    """Step: present the current question and wait for an answer."""

    type: Literal["question"] = "question"
    # 1-based, for display
    position: int
    label: str
    progress: Progress
    question: QuestionPayload


class ResultsStep(BaseModel):
    """Step: every question answered, show the summary and a restart action."""

    type: Literal["results"] = "results"
    title: str
    message: str
    progress: Progress
    answers: list[AnsweredQuestion]


# Callers can match on step.type to dispatch rendering logic.
StepResult = QuestionStep | ResultsStep
