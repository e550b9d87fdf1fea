"""Shared fixtures for quiz bot tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

from quiz_bot.core.models import Question, QuestionFormat
from quiz_bot.data.default_quiz import UCF_QUIZ
from quiz_bot.data.loader import parse_questions


@pytest.fixture
def ucf_questions():
    """Built-in three-question quiz: single, boolean, multi."""
    return parse_questions(UCF_QUIZ)


@pytest.fixture
def single_question():
    return Question(
        prompt="In what year was UCF founded?",
        format=QuestionFormat.SINGLE_CHOICE,
        choices=("1963", "1738", "1954", "1973"),
        correct=0,
    )


@pytest.fixture
def boolean_question():
    return Question(
        prompt="UCF stands for the University of Central Florida.",
        format=QuestionFormat.BOOLEAN_CHOICE,
        choices=("True", "False"),
        correct=0,
    )


@pytest.fixture
def multi_question():
    return Question(
        prompt="Which of these are UCF Housing communities?",
        format=QuestionFormat.MULTI_CHOICE,
        choices=("Libra", "Mercury", "Neptune", "Orion"),
        correct=frozenset({0, 2}),
    )


@pytest.fixture
def fsm_state():
    """Real FSM context over in-memory storage for one user."""
    return FSMContext(
        storage=MemoryStorage(),
        key=StorageKey(bot_id=1, chat_id=12345, user_id=12345),
    )


@pytest.fixture
def make_callback():
    """Factory for mocked CallbackQuery objects."""
    def _make(data: str, user_id: int = 12345) -> AsyncMock:
        callback = AsyncMock()
        callback.from_user = MagicMock()
        callback.from_user.id = user_id
        callback.data = data
        callback.message = AsyncMock()
        callback.message.edit_text = AsyncMock()
        callback.message.edit_reply_markup = AsyncMock()
        callback.answer = AsyncMock()
        return callback
    return _make
