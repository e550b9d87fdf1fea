"""Quiz session state machine: Active(0) .. Active(n-1) -> Finished."""
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from quiz_bot.core.exceptions import IndexOutOfRange, InvalidDataset, SessionFinished
from quiz_bot.core.models import Answer, Question, QuestionFormat, _is_index, validate_question

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Snapshot of one quiz run. Every operation returns a new snapshot."""
    questions: tuple
    current_index: int = 0
    answers: tuple = ()
    pending: Optional[Answer] = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.current_index >= len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.is_finished:
            return None
        return self.questions[self.current_index]

    @property
    def position(self) -> int:
        """1-based number of the current question."""
        return min(self.current_index + 1, self.total)


def start(questions: Iterable[Question]) -> SessionState:
    """Create a session positioned on the first question."""
    questions = tuple(questions)
    if not questions:
        raise InvalidDataset("Quiz has no questions")
    for question in questions:
        validate_question(question)

    logger.debug("Session started with %d questions", len(questions))
    return SessionState(
        questions=questions,
        current_index=0,
        answers=(),
        pending=Answer.empty(questions[0].format),
    )


def select(state: SessionState, choice_index: int) -> SessionState:
    """Apply a choice press to the current question's pending selection."""
    question = state.current_question
    if question is None:
        raise SessionFinished("Cannot select a choice after the quiz has finished")

    if not _is_index(choice_index) or not 0 <= choice_index < len(question.choices):
        raise IndexOutOfRange(
            f"Choice {choice_index!r} is out of range for question "
            f"{state.current_index + 1} ({len(question.choices)} choices)"
        )

    pending = state.pending or Answer.empty(question.format)

    if question.format is QuestionFormat.MULTI_CHOICE:
        if choice_index in pending.selection:
            selection = pending.selection - {choice_index}
        else:
            selection = pending.selection | {choice_index}
    elif question.format in (QuestionFormat.SINGLE_CHOICE, QuestionFormat.BOOLEAN_CHOICE):
        selection = frozenset((choice_index,))
    else:
        raise ValueError(f"Unknown question format: {question.format!r}")

    return replace(state, pending=replace(pending, selection=selection, answered=True))


def advance(state: SessionState) -> SessionState:
    """Freeze the pending selection and move to the next question or the summary."""
    if state.is_finished:
        raise SessionFinished("Quiz has already finished")

    question = state.questions[state.current_index]
    frozen = state.pending or Answer.empty(question.format)
    answers = state.answers + (frozen,)
    next_index = state.current_index + 1

    if next_index < len(state.questions):
        logger.debug("Advanced to question %d of %d", next_index + 1, len(state.questions))
        return replace(
            state,
            current_index=next_index,
            answers=answers,
            pending=Answer.empty(state.questions[next_index].format),
        )

    logger.debug("Session finished after %d questions", len(state.questions))
    return replace(state, current_index=next_index, answers=answers, pending=None)
