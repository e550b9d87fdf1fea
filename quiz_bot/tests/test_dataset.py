"""Tests for question validation and dataset loading."""
import json

import pytest

from quiz_bot.core.exceptions import InvalidDataset
from quiz_bot.core.models import Question, QuestionFormat, correct_indices
from quiz_bot.data.loader import get_questions, load_questions, parse_questions


def _record(**overrides) -> dict:
    record = {
        "prompt": "Pick one",
        "type": "multiple-choice",
        "choices": ["a", "b", "c"],
        "correct": 1,
    }
    record.update(overrides)
    return record


class TestQuestionFromDict:
    """Tests for construction-time validation."""

    def test_single(self):
        question = Question.from_dict(_record())

        assert question.format is QuestionFormat.SINGLE_CHOICE
        assert question.choices == ("a", "b", "c")
        assert question.correct == 1
        assert correct_indices(question) == frozenset({1})

    def test_multi(self):
        question = Question.from_dict(_record(type="multiple-answer", correct=[2, 0]))

        assert question.format is QuestionFormat.MULTI_CHOICE
        assert question.correct == frozenset({0, 2})

    @pytest.mark.parametrize("overrides", [
        {"correct": 3},
        {"correct": -1},
        {"correct": True},
        {"correct": [1]},
        {"type": "multiple-answer", "correct": []},
        {"type": "multiple-answer", "correct": [0, 0]},
        {"type": "multiple-answer", "correct": [0, 5]},
        {"type": "multiple-answer", "correct": 1},
        {"type": "true-false", "choices": ["True", "False", "Maybe"], "correct": 0},
        {"type": "fill_blank"},
        {"choices": []},
        {"prompt": "  "},
        {"prompt": None},
        {"type": "multiple-answer", "correct": [[0]]},
        {"type": "multiple-answer", "correct": [0, "2"]},
        {"choices": 5},
        {"choices": None},
        {"choices": "abc", "correct": 0},
        {"type": "true-false", "choices": "TF", "correct": 0},
        {"choices": ["a", 2, "c"]},
    ])
    def test_invalid_records(self, overrides):
        """Malformed answer keys and shapes — InvalidDataset."""
        with pytest.raises(InvalidDataset):
            Question.from_dict(_record(**overrides))

    def test_missing_fields(self):
        with pytest.raises(InvalidDataset, match="correct"):
            Question.from_dict({"prompt": "x", "type": "true-false", "choices": ["T", "F"]})


class TestLoader:
    """Tests for dataset parsing and loading."""

    def test_builtin_quiz(self):
        questions = get_questions("")

        assert [q.format for q in questions] == [
            QuestionFormat.SINGLE_CHOICE,
            QuestionFormat.BOOLEAN_CHOICE,
            QuestionFormat.MULTI_CHOICE,
        ]
        assert questions[0].choices[questions[0].correct] == "1963"

    def test_parse_empty(self):
        with pytest.raises(InvalidDataset):
            parse_questions([])

    def test_parse_not_a_list(self):
        with pytest.raises(InvalidDataset):
            parse_questions({"prompt": "x"})

    def test_parse_reports_record_number(self):
        with pytest.raises(InvalidDataset, match="Question 2"):
            parse_questions([_record(), _record(correct=9)])

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps([_record(), _record(type="true-false", choices=["T", "F"], correct=1)]))

        questions = load_questions(path)

        assert len(questions) == 2
        assert questions[1].format is QuestionFormat.BOOLEAN_CHOICE

    def test_load_wrong_shapes(self, tmp_path):
        """Well-formed JSON with wrong field shapes — InvalidDataset, not TypeError."""
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps([_record(choices=None)]))

        with pytest.raises(InvalidDataset, match="Question 1"):
            load_questions(path)

    def test_load_bad_json(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text("[{not json")

        with pytest.raises(InvalidDataset):
            load_questions(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(InvalidDataset):
            get_questions(str(tmp_path / "nope.json"))
