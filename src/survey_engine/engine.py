"""SurveyEngine — the survey progression state machine.

States are ``Answering(i)`` for ``i`` in ``[0, total - 1]`` and ``Complete``:

    Answering(0) --submit--> Answering(1) --submit--> ... --submit--> Complete
    any state    --reset-->  Answering(0)

There is no skipping, going back, or branching.  The engine owns a
:class:`SessionState` value and replaces it on every transition; callers get
read access only.  A state handed back by a client (e.g. the web widget) can
be restored by passing it to the constructor; it is checked against the
question set first.
"""

from __future__ import annotations

import logging

from survey_engine.errors import InvalidStateError
from survey_engine.models.question import Question, QuestionSet
from survey_engine.models.session import Progress, SessionState, StepResult
from survey_engine.view import build_step, progress_of

logger = logging.getLogger(__name__)


class SurveyEngine:
    """Drives one survey session over a fixed question set.

    Args:
        questions: the survey's questions; must be non-empty with unique ids
        state: a previously issued state to resume from (default: initial)

    Raises:
        ConfigurationError: if *questions* is unusable
        InvalidStateError: if *state* is inconsistent with *questions*
    """

    def __init__(self, questions: QuestionSet, state: SessionState | None = None) -> None:
        questions.check()
        self._questions = questions
        if state is None:
            state = SessionState()
        else:
            self._check_state(state)
        self._state = state

    # ==================================================================
    # Read access
    # ==================================================================

    @property
    def questions(self) -> QuestionSet:
        return self._questions

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state.complete

    @property
    def answers(self) -> dict[int, str]:
        """Copy of the answers collected so far, keyed by question id."""
        return dict(self._state.answers)

    def current_question(self) -> Question:
        """The question awaiting an answer.

        Raises:
            InvalidStateError: if the survey is already complete.
        """
        if self._state.complete:
            raise InvalidStateError("No current question: survey is complete")
        return self._questions.at(self._state.current_index)

    def progress(self) -> Progress:
        return progress_of(self._questions, self._state)

    def view(self) -> StepResult:
        """Read-only projection of the current state for a renderer."""
        return build_step(self._questions, self._state)

    # ==================================================================
    # Transitions
    # ==================================================================

    def submit_answer(self, option: str) -> SessionState:
        """Record *option* for the current question and advance.

        The option is stored as given; it is not matched against the
        question's listed options.  Answering the last question completes
        the survey without moving the index past it.

        Raises:
            InvalidStateError: if the survey is already complete.
        """
        question = self.current_question()
        answers = {**self._state.answers, question.id: option}

        next_index = self._state.current_index + 1
        if next_index < self._questions.total:
            self._state = SessionState(current_index=next_index, answers=answers)
            logger.debug(
                "Answered question %d, advancing to index %d", question.id, next_index
            )
        else:
            self._state = SessionState(
                current_index=self._state.current_index,
                answers=answers,
                complete=True,
            )
            logger.info("Survey complete: %d answers collected", len(answers))
        return self._state

    def reset(self) -> SessionState:
        """Discard all answers and return to the first question."""
        self._state = SessionState()
        logger.debug("Survey reset")
        return self._state

    # ==================================================================
    # Helpers
    # ==================================================================

    def _check_state(self, state: SessionState) -> None:
        """Verify a restored state could have been produced by this engine.

        Answering at index ``i`` means exactly the first ``i`` questions are
        answered; complete means all of them are, with the index parked on
        the last question.
        """
        total = self._questions.total
        index = state.current_index
        if index >= total:
            raise InvalidStateError(
                f"current_index {index} out of range for {total} questions"
            )

        if state.complete:
            if index != total - 1:
                raise InvalidStateError(
                    f"Complete state must sit on the last question, got index {index}"
                )
            expected = self._questions.ids
        else:
            expected = self._questions.ids[:index]

        if set(state.answers) != set(expected):
            raise InvalidStateError(
                f"Answers for questions {sorted(state.answers)} do not match "
                f"the {len(expected)} questions answered so far"
            )
