"""QuestionStore — loads a survey's questions from YAML into a QuestionSet.

The store is loaded once at startup; the resulting ``QuestionSet`` is
read-only for the lifetime of every session that runs over it.

Usage::

    store = QuestionStore()          # defaults to the bundled questions.yaml
    questions = store.load()         # parse + validate

    questions.total                  # 5
    questions.at(2).options

Two YAML layouts are accepted: a bare list of question mappings, or a
mapping with a ``questions`` list and an optional ``title``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from survey_engine.constants import DEFAULT_QUESTION_FILE
from survey_engine.errors import ConfigurationError
from survey_engine.models.question import Question, QuestionSet

logger = logging.getLogger(__name__)


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class QuestionStore:
    """Loads a question file and builds a validated :class:`QuestionSet`.

    Attributes populated after :meth:`load`:

        questions — the loaded QuestionSet (None before load)
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_QUESTION_FILE
        self.questions: QuestionSet | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> QuestionSet:
        """Parse the YAML file into a QuestionSet.

        Raises:
            ConfigurationError: if the file is missing, unparsable, or
                describes an unusable question set.
        """
        try:
            raw = load_yaml(self._path)
        except FileNotFoundError as exc:
            raise ConfigurationError(str(exc)) from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {self._path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Cannot read {self._path}: {exc}") from exc

        self.questions = self.from_raw(raw, source=str(self._path))
        logger.info(
            "QuestionStore loaded: %d questions from %s",
            self.questions.total,
            self._path,
        )
        return self.questions

    @staticmethod
    def from_raw(raw: Any, *, source: str = "<data>") -> QuestionSet:
        """Build a QuestionSet from already-parsed YAML/JSON data."""
        title = None
        if isinstance(raw, dict):
            title = raw.get("title")
            raw = raw.get("questions")
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise ConfigurationError(
                f"Expected a list of questions in {source}, got {type(raw).__name__}"
            )

        parsed: list[Question] = []
        for i, q_dict in enumerate(raw):
            if not isinstance(q_dict, dict):
                raise ConfigurationError(f"Question #{i + 1} in {source} is not a mapping")
            try:
                parsed.append(Question(**q_dict))
            except ValidationError as exc:
                raise ConfigurationError(
                    f"Invalid question #{i + 1} in {source}: {exc}"
                ) from exc

        question_set = QuestionSet(questions=tuple(parsed), title=title)
        question_set.check()
        return question_set
