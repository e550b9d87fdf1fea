"""Scoring and per-choice feedback for finished quiz sessions."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from quiz_bot.core.exceptions import SessionNotFinished
from quiz_bot.core.models import Answer, Question, QuestionFormat, correct_indices
from quiz_bot.core.session import SessionState


class ChoiceFeedback(str, Enum):
    SELECTED_CORRECT = "selected_correct"
    SELECTED_INCORRECT = "selected_incorrect"
    MISSED_CORRECT = "missed_correct"
    NEUTRAL = "neutral"


def _selected(answer: Optional[Answer]) -> frozenset:
    if answer is None:
        return frozenset()
    return answer.selection


def is_correct(question: Question, answer: Optional[Answer]) -> bool:
    """Check if the user's answer matches the question's key exactly."""
    if answer is None:
        return False

    if question.format in (QuestionFormat.SINGLE_CHOICE, QuestionFormat.BOOLEAN_CHOICE):
        return answer.choice is not None and answer.choice == question.correct

    elif question.format is QuestionFormat.MULTI_CHOICE:
        # Set equality; an empty selection never matches a validated key
        return answer.selection == correct_indices(question)

    raise ValueError(f"Unknown question format: {question.format!r}")


def score(questions: Sequence[Question], answers: Sequence[Optional[Answer]]) -> int:
    """Number of correctly answered questions."""
    if len(questions) != len(answers):
        raise ValueError(
            f"Expected {len(questions)} answers, got {len(answers)}"
        )
    return sum(1 for q, a in zip(questions, answers) if is_correct(q, a))


def classify_choice(question: Question, answer: Optional[Answer], choice_index: int) -> ChoiceFeedback:
    """Feedback category of one choice, from set membership alone."""
    selected = choice_index in _selected(answer)
    is_correct_choice = choice_index in correct_indices(question)

    if selected and is_correct_choice:
        return ChoiceFeedback.SELECTED_CORRECT
    if selected:
        return ChoiceFeedback.SELECTED_INCORRECT
    if is_correct_choice:
        return ChoiceFeedback.MISSED_CORRECT
    return ChoiceFeedback.NEUTRAL


@dataclass(frozen=True)
class ChoiceReview:
    label: str
    feedback: ChoiceFeedback


@dataclass(frozen=True)
class QuestionReview:
    prompt: str
    choices: List[ChoiceReview]
    is_correct: bool
    answered: bool


@dataclass(frozen=True)
class QuizSummary:
    """View-model for the summary screen."""
    questions: List[QuestionReview]
    score: int
    total: int

    @property
    def percent(self) -> int:
        return round(self.score / self.total * 100) if self.total > 0 else 0


def review_question(question: Question, answer: Optional[Answer]) -> QuestionReview:
    return QuestionReview(
        prompt=question.prompt,
        choices=[
            ChoiceReview(label=label, feedback=classify_choice(question, answer, i))
            for i, label in enumerate(question.choices)
        ],
        is_correct=is_correct(question, answer),
        answered=answer is not None and answer.answered,
    )


def summarize(state: SessionState) -> QuizSummary:
    """Build the summary of a finished session."""
    if not state.is_finished:
        raise SessionNotFinished(
            f"Summary requested at question {state.position} of {state.total}"
        )

    return QuizSummary(
        questions=[review_question(q, a) for q, a in zip(state.questions, state.answers)],
        score=score(state.questions, state.answers),
        total=state.total,
    )
