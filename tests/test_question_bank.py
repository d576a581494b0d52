from __future__ import annotations

import pytest

from exam_app.core.errors import InvalidStateError, LoadError
from exam_app.core.models import Question
from exam_app.core.services.question_bank import QuestionBank


def _question(qid, options=("A", "B"), correct="A") -> Question:
    return Question(id=qid, text="?", options=options, correct_answer=correct)


def test_load_questions_keeps_order_and_lookup() -> None:
    bank = QuestionBank()
    bank.load_questions([_question(7), _question("x")])

    assert bank.get_question_count() == 2
    assert [q.id for q in bank.get_questions()] == [7, "x"]
    assert bank.get_question("x").id == "x"
    assert bank.get_question("missing") is None


def test_rejects_empty_set() -> None:
    with pytest.raises(LoadError):
        QuestionBank().load_questions([])


def test_rejects_duplicate_ids() -> None:
    bank = QuestionBank()
    with pytest.raises(LoadError, match="Duplicate"):
        bank.load_questions([_question(1), _question(1)])
    assert not bank.has_questions()


def test_rejects_correct_answer_outside_options() -> None:
    with pytest.raises(LoadError):
        QuestionBank().load_questions([_question(1, correct="Z")])


def test_rejects_question_without_options() -> None:
    with pytest.raises(LoadError):
        QuestionBank().load_questions([_question(1, options=(), correct="")])


def test_second_load_is_rejected() -> None:
    bank = QuestionBank()
    bank.load_questions([_question(1)])
    with pytest.raises(InvalidStateError):
        bank.load_questions([_question(2)])
    assert [q.id for q in bank.get_questions()] == [1]
