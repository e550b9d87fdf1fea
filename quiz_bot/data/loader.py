import json
import logging
from pathlib import Path

from quiz_bot.core.exceptions import InvalidDataset
from quiz_bot.core.models import Question
from quiz_bot.data.default_quiz import UCF_QUIZ

logger = logging.getLogger(__name__)


def parse_questions(records: list[dict]) -> tuple[Question, ...]:
    """Validate raw question records. Raises InvalidDataset on the first bad one."""
    if not isinstance(records, list):
        raise InvalidDataset("Quiz dataset must be a JSON array of questions")
    if not records:
        raise InvalidDataset("Quiz dataset is empty")

    questions = []
    for i, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            logger.error("Question %d is not an object: %r", i, record)
            raise InvalidDataset(f"Question {i} is not an object")
        try:
            questions.append(Question.from_dict(record))
        except InvalidDataset as e:
            logger.error("Invalid question %d: %s", i, e)
            raise InvalidDataset(f"Question {i}: {e}") from e

    return tuple(questions)


def load_questions(path: str | Path) -> tuple[Question, ...]:
    """Load and validate a quiz from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidDataset(f"Cannot read quiz file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidDataset(f"Quiz file {path} is not valid JSON: {e}") from e

    questions = parse_questions(raw)
    logger.info("Loaded %d questions from %s", len(questions), path)
    return questions


def get_questions(quiz_file: str = "") -> tuple[Question, ...]:
    """Questions from ``quiz_file`` if set, otherwise the built-in quiz."""
    if quiz_file:
        return load_questions(quiz_file)
    questions = parse_questions(UCF_QUIZ)
    logger.info("Using built-in quiz (%d questions)", len(questions))
    return questions
