"""Business logic for one timed exam session shared between UI and timer."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from threading import Lock
from typing import Protocol

from exam_app.constants.exam_constants import TEST_DURATION_SECONDS
from exam_app.core.errors import InvalidAnswerError, InvalidStateError, LoadError
from exam_app.core.models import (
    ExamPhase,
    ExamSnapshot,
    Question,
    QuestionId,
    QuestionSnapshot,
)
from exam_app.core.services.countdown import Countdown
from exam_app.core.services.exam_session import ExamSession
from exam_app.core.services.question_bank import QuestionBank
from exam_app.core.services.scoring import score

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[ExamSnapshot], None]


class QuestionSource(Protocol):
    def load(self) -> list[Question]: ...


class ResultSink(Protocol):
    def report(self, snapshot: ExamSnapshot) -> object: ...


class ExamManager:
    """Facade over QuestionBank, ExamSession and Countdown.

    Every mutation runs under one lock, so user actions and timer ticks
    apply strictly one after another. Each operation returns a fresh
    immutable snapshot and the same snapshot is pushed to subscribers once
    the lock has been released.
    """

    def __init__(
        self,
        reporter: ResultSink | None = None,
        duration_seconds: int = TEST_DURATION_SECONDS,
    ) -> None:
        self._lock = Lock()

        # Services
        self._bank = QuestionBank()
        self._session = ExamSession()
        self._countdown = Countdown(duration_seconds)
        self._reporter = reporter

        self._listeners: list[SnapshotListener] = []
        self._loading: bool = False
        self._load_error: str | None = None
        self._closed: bool = False

    # --- Subscriptions ---

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> ExamSnapshot:
        with self._lock:
            return self._build_snapshot()

    # --- Loading ---

    def begin_loading(self) -> ExamSnapshot:
        with self._lock:
            self._ensure_open()
            if self._bank.has_questions():
                raise InvalidStateError("Questions have already been loaded for this session.")
            self._loading = True
            self._load_error = None
            snapshot = self._build_snapshot()
        self._notify(snapshot)
        return snapshot

    def install_questions(self, questions: Iterable[Question]) -> ExamSnapshot:
        try:
            with self._lock:
                self._ensure_open()
                self._bank.load_questions(list(questions))
                self._session.initialize(self._bank.get_questions())
                self._loading = False
                self._load_error = None
                snapshot = self._build_snapshot()
        except LoadError as exc:
            self.record_load_failure(exc)
            raise
        logger.info("Loaded %d questions", snapshot.question_count)
        self._notify(snapshot)
        return snapshot

    def record_load_failure(self, error: Exception | str) -> ExamSnapshot:
        with self._lock:
            self._ensure_open()
            if self._bank.has_questions():
                raise InvalidStateError("Questions have already been loaded for this session.")
            self._loading = False
            self._load_error = str(error) or "Failed to load questions."
            snapshot = self._build_snapshot()
        logger.warning("Question loading failed: %s", snapshot.load_error)
        self._notify(snapshot)
        return snapshot

    def load(self, loader: QuestionSource) -> ExamSnapshot:
        """Fetch and install the questions synchronously; safe to retry after a failure."""
        self.begin_loading()
        try:
            questions = loader.load()
        except LoadError as exc:
            self.record_load_failure(exc)
            raise
        except Exception as exc:
            logger.exception("Unexpected error while loading questions")
            error = LoadError(f"Unexpected error while loading questions: {exc}")
            self.record_load_failure(error)
            raise error from exc
        return self.install_questions(questions)

    # --- Exam lifecycle ---

    def start(self) -> ExamSnapshot:
        with self._lock:
            self._ensure_open()
            if not self._bank.has_questions():
                raise InvalidStateError("Cannot start the test before questions are loaded.")
            if self._session.is_submitted():
                raise InvalidStateError("The test has already been submitted.")
            if self._session.is_started():
                return self._build_snapshot()
            self._session.start_session()
            self._countdown.start()
            snapshot = self._build_snapshot()
        logger.info(
            "Test started with %d questions and %d seconds",
            snapshot.question_count,
            snapshot.time_left_seconds,
        )
        self._notify(snapshot)
        return snapshot

    def select_answer(self, question_id: QuestionId, option: str) -> ExamSnapshot:
        def operation() -> None:
            question = self._bank.get_question(question_id)
            if question is None:
                raise InvalidAnswerError(f"Unknown question id {question_id!r}.")
            self._session.record_answer(question, option)

        return self._apply(operation)

    def advance(self) -> ExamSnapshot:
        return self._apply(self._session.advance)

    def retreat(self) -> ExamSnapshot:
        return self._apply(self._session.retreat)

    def mark_for_review(self) -> ExamSnapshot:
        return self._apply(self._session.mark_for_review)

    def jump_to(self, index: int) -> ExamSnapshot:
        return self._apply(lambda: self._session.jump_to(index))

    def submit(self) -> ExamSnapshot:
        with self._lock:
            self._ensure_open()
            if self._session.is_submitted():
                return self._build_snapshot()
            self._ensure_in_progress()
            snapshot = self._submit_locked(automatic=False)
        self._after_submit(snapshot)
        return snapshot

    def tick(self) -> ExamSnapshot:
        """Advance the countdown by one second, submitting when it reaches zero."""
        with self._lock:
            if self._closed or not self._session.is_started() or self._session.is_submitted():
                return self._build_snapshot()
            expired = self._countdown.tick()
            if expired:
                snapshot = self._submit_locked(automatic=True)
            else:
                snapshot = self._build_snapshot()
        if expired:
            self._after_submit(snapshot)
        else:
            self._notify(snapshot)
        return snapshot

    def close(self) -> None:
        """Tear the session down; later mutations are rejected."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._countdown.stop()
            snapshot = self._build_snapshot()
        self._notify(snapshot)
        with self._lock:
            self._listeners.clear()

    # --- Internals ---

    def _apply(self, operation: Callable[[], None]) -> ExamSnapshot:
        with self._lock:
            self._ensure_open()
            self._ensure_in_progress()
            operation()
            snapshot = self._build_snapshot()
        self._notify(snapshot)
        return snapshot

    def _ensure_open(self) -> None:
        if self._closed:
            raise InvalidStateError("The exam session has been closed.")

    def _ensure_in_progress(self) -> None:
        if not self._session.is_started():
            raise InvalidStateError("The test has not been started.")
        if self._session.is_submitted():
            raise InvalidStateError("The test has already been submitted.")

    def _submit_locked(self, *, automatic: bool) -> ExamSnapshot:
        self._countdown.stop()
        summary = score(self._bank.get_questions(), self._session.get_runtime_states())
        self._session.mark_submitted(summary, automatic=automatic)
        return self._build_snapshot()

    def _after_submit(self, snapshot: ExamSnapshot) -> None:
        summary = snapshot.score
        logger.info(
            "Test submitted (%s): %d/%d correct, %d%%",
            "automatic" if snapshot.auto_submitted else "manual",
            summary.correct,
            summary.total,
            summary.percentage,
        )
        self._notify(snapshot)
        if self._reporter is None:
            return
        try:
            self._reporter.report(snapshot)
        except Exception:
            logger.exception("Result reporter failed to dispatch the final snapshot")

    def _notify(self, snapshot: ExamSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)

    def _phase(self) -> ExamPhase:
        if self._closed:
            return ExamPhase.CLOSED
        if self._session.is_submitted():
            return ExamPhase.SUBMITTED
        if self._session.is_started():
            return ExamPhase.IN_PROGRESS
        if self._bank.has_questions():
            return ExamPhase.READY
        if self._load_error is not None and not self._loading:
            return ExamPhase.LOAD_ERROR
        return ExamPhase.LOADING

    def _build_snapshot(self) -> ExamSnapshot:
        states = self._session.get_runtime_states()
        questions = tuple(
            QuestionSnapshot(
                index=index,
                question=question,
                status=states[question.id].status,
                selected_option=states[question.id].selected_option,
                visited=self._session.is_visited(question.id),
            )
            for index, question in enumerate(self._bank.get_questions())
        )
        return ExamSnapshot(
            phase=self._phase(),
            questions=questions,
            current_index=self._session.get_current_index(),
            time_left_seconds=self._countdown.remaining_seconds,
            started=self._session.is_started(),
            submitted=self._session.is_submitted(),
            auto_submitted=self._session.was_auto_submitted(),
            score=self._session.get_score(),
            load_error=self._load_error,
        )
