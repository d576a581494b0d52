"""Domain models for the exam application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

QuestionId = int | str


class QuestionStatus(str, Enum):
    """Status shown for every question; exactly one applies at a time."""

    NOT_ATTEMPTED = "NOT_ATTEMPTED"
    ANSWERED = "ANSWERED"
    NOT_ANSWERED = "NOT_ANSWERED"
    REVIEW = "REVIEW"


class ExamPhase(str, Enum):
    """Coarse lifecycle phase derived from the session flags."""

    LOADING = "LOADING"
    LOAD_ERROR = "LOAD_ERROR"
    READY = "READY"
    IN_PROGRESS = "IN_PROGRESS"
    SUBMITTED = "SUBMITTED"
    CLOSED = "CLOSED"


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question as delivered by the question bank."""

    id: QuestionId
    text: str
    options: tuple[str, ...]
    correct_answer: str


@dataclass(slots=True)
class QuestionRuntimeState:
    """Mutable per-question state owned by the exam session."""

    status: QuestionStatus = QuestionStatus.NOT_ATTEMPTED
    selected_option: str | None = None


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Final score frozen at submission time."""

    correct: int
    total: int
    percentage: int


@dataclass(frozen=True, slots=True)
class QuestionSnapshot:
    """Read-only view of one question and its runtime state."""

    index: int
    question: Question
    status: QuestionStatus
    selected_option: str | None
    visited: bool


@dataclass(frozen=True, slots=True)
class ExamSnapshot:
    """Read-only view of the whole exam at a point in time.

    Snapshots are what the presentation layer renders and what the result
    reporter sends; they never change after creation.
    """

    phase: ExamPhase
    questions: tuple[QuestionSnapshot, ...] = ()
    current_index: int = 0
    time_left_seconds: int = 0
    started: bool = False
    submitted: bool = False
    auto_submitted: bool = False
    score: ScoreSummary | None = None
    load_error: str | None = None

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuestionSnapshot | None:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def answered_count(self) -> int:
        return sum(1 for q in self.questions if q.selected_option is not None)

    def status_counts(self) -> dict[QuestionStatus, int]:
        counts = {status: 0 for status in QuestionStatus}
        for question in self.questions:
            counts[question.status] += 1
        return counts
