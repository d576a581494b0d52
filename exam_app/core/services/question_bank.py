"""Service holding the immutable question set for one exam session."""

from __future__ import annotations

from exam_app.core.errors import InvalidStateError, LoadError
from exam_app.core.models import Question, QuestionId


class QuestionBank:
    """Stores the validated questions; filled exactly once per session."""

    def __init__(self) -> None:
        self._questions: tuple[Question, ...] = ()
        self._positions: dict[QuestionId, int] = {}

    def load_questions(self, questions: list[Question]) -> None:
        """Validate and store the question set. A second successful load is rejected."""
        if self._questions:
            raise InvalidStateError("Questions have already been loaded for this session.")
        if not questions:
            raise LoadError("The question bank returned no questions.")

        positions: dict[QuestionId, int] = {}
        for index, question in enumerate(questions):
            self._validate_question(question)
            if question.id in positions:
                raise LoadError(f"Duplicate question id {question.id!r}.")
            positions[question.id] = index

        self._questions = tuple(questions)
        self._positions = positions

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    def has_questions(self) -> bool:
        return bool(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_question_at_index(self, index: int) -> Question:
        return self._questions[index]

    def get_question(self, question_id: QuestionId) -> Question | None:
        position = self._positions.get(question_id)
        if position is None:
            return None
        return self._questions[position]

    @staticmethod
    def _validate_question(question: Question) -> None:
        if not question.options:
            raise LoadError(f"Question {question.id!r} has no options.")
        if question.correct_answer not in question.options:
            raise LoadError(
                f"Correct answer of question {question.id!r} is not one of its options."
            )
