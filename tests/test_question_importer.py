from __future__ import annotations

from pathlib import Path

import pytest

from exam_app.core.models import Question
from exam_app.core.question_importer import (
    QuestionImportError,
    load_questions_from_file,
    parse_question_text,
)

_SAMPLE = """
ID: alg-1
Q: What is $2 + 2$?
   Show your reasoning.
A: 3
B: 4
C: 5
CORRECT: b

---

Q: Pick the queue.
A: Stack
B: Queue
CORRECT: B
"""


def test_parse_question_text() -> None:
    questions = parse_question_text(_SAMPLE)
    assert questions == [
        Question(
            id="alg-1",
            text="What is $2 + 2$?\nShow your reasoning.",
            options=("3", "4", "5"),
            correct_answer="4",
        ),
        Question(id=2, text="Pick the queue.", options=("Stack", "Queue"), correct_answer="Queue"),
    ]


def test_numeric_ids_become_integers() -> None:
    [question] = parse_question_text("ID: 12\nQ: ?\nA: x\nB: y\nCORRECT: A")
    assert question.id == 12


@pytest.mark.parametrize(
    "text",
    [
        "Q: only one option\nA: x\nCORRECT: A",
        "Q: gap\nA: x\nC: y\nCORRECT: A",
        "Q: missing correct\nA: x\nB: y",
        "Q: bad correct\nA: x\nB: y\nCORRECT: D",
        "Q: same\nA: x\nB: x\nCORRECT: A",
        "stray text\nQ: ?\nA: x\nB: y\nCORRECT: A",
        "ID: 1\nQ: a\nA: x\nB: y\nCORRECT: A\n\nID: 1\nQ: b\nA: x\nB: y\nCORRECT: A",
    ],
)
def test_invalid_blocks_are_rejected(text: str) -> None:
    with pytest.raises(QuestionImportError):
        parse_question_text(text)


def test_load_questions_from_file(tmp_path: Path) -> None:
    path = tmp_path / "bank.txt"
    path.write_text(_SAMPLE, encoding="utf-8")
    assert len(load_questions_from_file(path)) == 2


def test_empty_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("\n\n---\n", encoding="utf-8")
    with pytest.raises(QuestionImportError):
        load_questions_from_file(path)
