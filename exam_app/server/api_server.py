"""FastAPI server acting as a local question bank and result collector."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from threading import Lock, Thread
import time
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException
import uvicorn

from exam_app.constants.network_constants import (
    LOCAL_HOST,
    LOCAL_PORT,
    SERVER_STARTUP_TIMEOUT_SECONDS,
)
from exam_app.core.models import Question, QuestionRuntimeState
from exam_app.core.schemas import QuestionRecord, SubmissionPayload
from exam_app.core.services.scoring import score

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SubmissionReceipt:
    """Summary kept for every submission received by the collector."""

    submission_id: str
    received_at: datetime
    correct: int
    total: int
    percentage: int


class SubmissionStore:
    """Thread-safe in-memory list of received submissions."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._receipts: list[SubmissionReceipt] = []

    def add(self, payload: SubmissionPayload) -> SubmissionReceipt:
        questions = [record.to_question() for record in payload.questions]
        states = {
            record.id: QuestionRuntimeState(record.status, record.selected_answers)
            for record in payload.questions
        }
        summary = score(questions, states)
        receipt = SubmissionReceipt(
            submission_id=uuid4().hex,
            received_at=datetime.now(timezone.utc),
            correct=summary.correct,
            total=summary.total,
            percentage=summary.percentage,
        )
        with self._lock:
            self._receipts.append(receipt)
        return receipt

    def get_receipts(self) -> list[SubmissionReceipt]:
        with self._lock:
            return list(self._receipts)


def _get_store_dependency(store: SubmissionStore):
    def dependency() -> SubmissionStore:
        return store

    return dependency


def create_api_app(questions: list[Question], store: SubmissionStore | None = None) -> FastAPI:
    """Create a FastAPI application serving the given questions."""
    app = FastAPI(title="ExamQt Question Bank", version="0.1.0")
    store = store or SubmissionStore()
    store_dep = _get_store_dependency(store)
    question_payload = [
        QuestionRecord.from_question(question).model_dump(mode="json", by_alias=True)
        for question in questions
    ]

    @app.get("/api/questions")
    def get_questions() -> list[dict[str, object]]:
        return question_payload

    @app.post("/api/submit-test", status_code=201)
    def submit_test(
        payload: SubmissionPayload,
        submissions: SubmissionStore = Depends(store_dep),
    ) -> dict[str, object]:
        if not payload.questions:
            raise HTTPException(status_code=422, detail="Submission contains no questions.")
        question_ids = [record.id for record in payload.questions]
        if len(set(question_ids)) != len(question_ids):
            raise HTTPException(status_code=422, detail="Submission repeats a question id.")
        receipt = submissions.add(payload)
        logger.info(
            "Received submission %s: %d/%d correct",
            receipt.submission_id,
            receipt.correct,
            receipt.total,
        )
        return {
            "status": "received",
            "submission_id": receipt.submission_id,
            "correct": receipt.correct,
            "total": receipt.total,
            "percentage": receipt.percentage,
        }

    @app.get("/api/submissions")
    def list_submissions(
        submissions: SubmissionStore = Depends(store_dep),
    ) -> list[dict[str, object]]:
        return [
            {
                "submission_id": receipt.submission_id,
                "received_at": receipt.received_at.isoformat(),
                "correct": receipt.correct,
                "total": receipt.total,
                "percentage": receipt.percentage,
            }
            for receipt in submissions.get_receipts()
        ]

    return app


def start_api_server(
    questions: list[Question],
    host: str = LOCAL_HOST,
    port: int = LOCAL_PORT,
    startup_timeout: float = SERVER_STARTUP_TIMEOUT_SECONDS,
) -> Thread:
    """Start the FastAPI server in a background daemon thread.

    Returns once the server accepts connections, the server thread has died,
    or ``startup_timeout`` seconds have passed.
    """
    app = create_api_app(questions)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ExamBankServer", daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        logger.warning("Question bank server on %s:%d did not start", host, port)
    return thread
