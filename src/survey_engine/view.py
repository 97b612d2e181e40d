"""View projection — turns (QuestionSet, SessionState) into a StepResult.

Pure functions only: nothing here mutates state or does I/O, so a renderer
can call :func:`build_step` after every transition and redraw from scratch.
"""

from survey_engine.constants import POSITION_LABEL, RESULTS_MESSAGE, RESULTS_TITLE
from survey_engine.models.question import Question, QuestionSet
from survey_engine.models.session import (
    AnsweredQuestion,
    Progress,
    QuestionPayload,
    QuestionStep,
    ResultsStep,
    SessionState,
    StepResult,
)


def progress_of(questions: QuestionSet, state: SessionState) -> Progress:
    """Progress for *state*; reaches ``total`` once the session is complete."""
    current = questions.total if state.complete else state.current_index
    return Progress(current=current, total=questions.total)


def to_payload(question: Question) -> QuestionPayload:
    return QuestionPayload(
        id=question.id,
        prompt=question.prompt,
        image=question.image,
        options=list(question.options),
    )


def build_step(questions: QuestionSet, state: SessionState) -> StepResult:
    """Project the session onto what a renderer needs to draw.

    While answering this is a :class:`QuestionStep` for the current
    question; once complete it is a :class:`ResultsStep` listing every
    question in set order with the answer given.
    """
    progress = progress_of(questions, state)

    if state.complete:
        return ResultsStep(
            title=RESULTS_TITLE,
            message=RESULTS_MESSAGE,
            progress=progress,
            answers=[
                AnsweredQuestion(id=q.id, prompt=q.prompt, answer=state.answers.get(q.id))
                for q in questions.questions
            ],
        )

    position = state.current_index + 1
    return QuestionStep(
        position=position,
        label=POSITION_LABEL.format(position=position, total=questions.total),
        progress=progress,
        question=to_payload(questions.at(state.current_index)),
    )
