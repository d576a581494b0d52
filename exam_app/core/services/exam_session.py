"""Service for the runtime state of one exam attempt."""

from __future__ import annotations

from exam_app.core.errors import IndexOutOfRangeError, InvalidAnswerError
from exam_app.core.models import (
    Question,
    QuestionId,
    QuestionRuntimeState,
    QuestionStatus,
    ScoreSummary,
)


class ExamSession:
    """Tracks statuses, selections, visits and the cursor of an exam.

    Callers are responsible for phase checks and serialisation; every method
    here either applies fully or raises before touching state.
    """

    def __init__(self) -> None:
        self._question_ids: list[QuestionId] = []
        self._states: dict[QuestionId, QuestionRuntimeState] = {}
        self._visited: set[QuestionId] = set()
        self._current_index: int = 0
        self._started: bool = False
        self._submitted: bool = False
        self._auto_submitted: bool = False
        self._score: ScoreSummary | None = None

    def initialize(self, questions: tuple[Question, ...]) -> None:
        self._question_ids = [question.id for question in questions]
        self._states = {question.id: QuestionRuntimeState() for question in questions}
        self._visited = set()
        self._current_index = 0

    def start_session(self) -> None:
        self._started = True

    def is_started(self) -> bool:
        return self._started

    def is_submitted(self) -> bool:
        return self._submitted

    def was_auto_submitted(self) -> bool:
        return self._auto_submitted

    def get_score(self) -> ScoreSummary | None:
        return self._score

    def get_current_index(self) -> int:
        return self._current_index

    def get_question_count(self) -> int:
        return len(self._question_ids)

    def record_answer(self, question: Question, option: str) -> None:
        state = self._states.get(question.id)
        if state is None:
            raise InvalidAnswerError(f"Unknown question id {question.id!r}.")
        if option not in question.options:
            raise InvalidAnswerError(
                f"{option!r} is not an option of question {question.id!r}."
            )
        state.selected_option = option
        state.status = QuestionStatus.ANSWERED

    def advance(self) -> None:
        question_id = self._question_ids[self._current_index]
        self._visited.add(question_id)
        state = self._states[question_id]
        if state.selected_option is None and state.status is QuestionStatus.NOT_ATTEMPTED:
            state.status = QuestionStatus.NOT_ANSWERED
        if self._current_index < len(self._question_ids) - 1:
            self._current_index += 1

    def retreat(self) -> None:
        if self._current_index > 0:
            self._current_index -= 1

    def mark_for_review(self) -> None:
        question_id = self._question_ids[self._current_index]
        self._states[question_id].status = QuestionStatus.REVIEW

    def jump_to(self, index: int) -> None:
        if not 0 <= index < len(self._question_ids):
            raise IndexOutOfRangeError(
                f"Question index {index} out of range (0..{len(self._question_ids) - 1})"
            )
        self._visited.add(self._question_ids[index])
        self._current_index = index

    def mark_submitted(self, summary: ScoreSummary, *, automatic: bool) -> None:
        self._submitted = True
        self._auto_submitted = automatic
        self._score = summary

    def get_runtime_states(self) -> dict[QuestionId, QuestionRuntimeState]:
        """Return copies so callers cannot mutate session state."""
        return {
            question_id: QuestionRuntimeState(state.status, state.selected_option)
            for question_id, state in self._states.items()
        }

    def is_visited(self, question_id: QuestionId) -> bool:
        return question_id in self._visited
