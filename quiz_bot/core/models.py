"""Question and answer models for the quiz engine."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from quiz_bot.core.exceptions import InvalidDataset


class QuestionFormat(str, Enum):
    """Closed set of answer formats. Values are the dataset ``type`` tokens."""

    SINGLE_CHOICE = "multiple-choice"
    BOOLEAN_CHOICE = "true-false"
    MULTI_CHOICE = "multiple-answer"

    @property
    def is_multi(self) -> bool:
        return self is QuestionFormat.MULTI_CHOICE


CorrectAnswer = Union[int, frozenset]


@dataclass(frozen=True)
class Question:
    """Single quiz question. Choices are referenced by index only."""
    prompt: str
    format: QuestionFormat
    choices: tuple
    correct: CorrectAnswer

    @staticmethod
    def from_dict(d: Dict) -> "Question":
        """
        Build a question from a raw dataset record.

        Expected keys: ``prompt``, ``type``, ``choices`` and ``correct``
        (an index, or a list of indices for ``multiple-answer``).
        """
        missing = [key for key in ("prompt", "type", "choices", "correct") if key not in d]
        if missing:
            raise InvalidDataset(f"Question record is missing fields: {', '.join(missing)}")

        try:
            fmt = QuestionFormat(d["type"])
        except ValueError:
            raise InvalidDataset(f"Unknown question type: {d['type']!r}") from None

        prompt = d["prompt"]
        if not isinstance(prompt, str):
            raise InvalidDataset(f"Question prompt must be text, got {prompt!r}")

        raw_choices = d["choices"]
        if not isinstance(raw_choices, (list, tuple)) or not all(isinstance(c, str) for c in raw_choices):
            raise InvalidDataset(f"Question choices must be a list of text labels: {prompt!r}")

        raw_correct = d["correct"]
        if fmt.is_multi:
            if not isinstance(raw_correct, (list, tuple)):
                raise InvalidDataset("multiple-answer key must be a list of indices")
            if not all(_is_index(i) for i in raw_correct):
                raise InvalidDataset(f"Answer key must contain only indices: {list(raw_correct)!r}")
            if len(set(raw_correct)) != len(raw_correct):
                raise InvalidDataset(f"Duplicate indices in answer key: {list(raw_correct)}")
            correct: CorrectAnswer = frozenset(raw_correct)
        else:
            correct = raw_correct

        question = Question(
            prompt=prompt,
            format=fmt,
            choices=tuple(raw_choices),
            correct=correct,
        )
        validate_question(question)
        return question


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid choice index
    return isinstance(value, int) and not isinstance(value, bool)


def validate_question(question: Question) -> None:
    """Raise InvalidDataset if the question's answer key is malformed."""
    if not isinstance(question.prompt, str) or not question.prompt.strip():
        raise InvalidDataset("Question prompt is empty")
    if not isinstance(question.choices, tuple) or not all(isinstance(c, str) for c in question.choices):
        raise InvalidDataset(f"Question choices must be a tuple of text labels: {question.prompt!r}")

    n = len(question.choices)
    if n == 0:
        raise InvalidDataset(f"Question has no choices: {question.prompt!r}")

    if question.format is QuestionFormat.BOOLEAN_CHOICE and n != 2:
        raise InvalidDataset(
            f"true-false question needs exactly 2 choices, got {n}: {question.prompt!r}"
        )

    if question.format.is_multi:
        if not isinstance(question.correct, frozenset):
            raise InvalidDataset(f"multiple-answer key must be a set: {question.prompt!r}")
        if not question.correct:
            raise InvalidDataset(f"multiple-answer key is empty: {question.prompt!r}")
        indices = question.correct
    else:
        if not _is_index(question.correct):
            raise InvalidDataset(f"Answer key must be a single index: {question.prompt!r}")
        indices = (question.correct,)

    for index in indices:
        if not _is_index(index) or not 0 <= index < n:
            raise InvalidDataset(
                f"Answer key index {index!r} out of range 0..{n - 1}: {question.prompt!r}"
            )


def correct_indices(question: Question) -> frozenset:
    """Answer key as a set (singleton for single-index formats)."""
    if question.format.is_multi:
        return frozenset(question.correct)
    return frozenset((question.correct,))


@dataclass(frozen=True)
class Answer:
    """
    User's selection for one question.

    ``selection`` holds at most one index for single-index formats.
    ``answered`` tells "never touched" apart from a multi-answer the user
    toggled back down to nothing.
    """
    format: QuestionFormat
    selection: frozenset = field(default_factory=frozenset)
    answered: bool = False

    @classmethod
    def empty(cls, fmt: QuestionFormat) -> "Answer":
        return cls(format=fmt)

    @property
    def choice(self) -> Optional[int]:
        """The chosen index for single-index formats, None if unanswered."""
        if self.format.is_multi or not self.selection:
            return None
        return next(iter(self.selection))
