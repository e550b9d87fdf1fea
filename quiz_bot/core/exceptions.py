"""Custom exceptions for quiz session errors."""


class QuizError(Exception):
    """Base exception for quiz engine errors."""
    pass


class InvalidDataset(QuizError, ValueError):
    """Question list is empty or a question's answer key is malformed."""
    pass


class IndexOutOfRange(QuizError, IndexError):
    """Choice index is outside the current question's choices."""
    pass


class SessionFinished(QuizError):
    """Session already reached the summary; no more selections or advances."""
    pass


class SessionNotFinished(QuizError):
    """Summary requested while questions are still pending."""
    pass
