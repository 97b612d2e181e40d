"""Question and question-set models.

A survey is a fixed, ordered list of multiple-choice questions:

  - Question: immutable record (id, prompt, image, options)
  - QuestionSet: the ordered, read-only collection a session runs over

Both are frozen so nothing can edit the survey while a session is in flight.
The YAML files use ``question`` for the prompt text; ``prompt`` is accepted
too and is the name used on the wire.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from survey_engine.errors import ConfigurationError


class Question(BaseModel):
    """A single multiple-choice question.

    ``image`` is an opaque URI handed straight to the renderer; the engine
    never looks at it.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    prompt: str = Field(validation_alias=AliasChoices("prompt", "question"))
    image: Optional[str] = None
    options: tuple[str, ...] = Field(min_length=1)


class QuestionSet(BaseModel):
    """Ordered, immutable sequence of questions for one survey."""

    model_config = ConfigDict(frozen=True)

    questions: tuple[Question, ...] = ()
    title: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def ids(self) -> list[int]:
        return [q.id for q in self.questions]

    def __len__(self) -> int:
        return len(self.questions)

    def at(self, index: int) -> Question:
        """Return the question at *index* (0-based)."""
        return self.questions[index]

    def check(self) -> None:
        """Enforce the startup invariants: non-empty, unique ids.

        Per-question rules (non-empty options) are enforced by the
        ``Question`` model itself.

        Raises:
            ConfigurationError: if the set cannot back a survey session.
        """
        if not self.questions:
            raise ConfigurationError("Question set is empty")
        seen: set[int] = set()
        for q in self.questions:
            if q.id in seen:
                raise ConfigurationError(f"Duplicate question id {q.id}")
            seen.add(q.id)
