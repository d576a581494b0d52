from __future__ import annotations

import json
import logging

import httpx
import pytest

from exam_app.core.exam_manager import ExamManager
from exam_app.core.result_reporter import ResultReporter
from exam_fixtures import make_questions

_URL = "http://collector.test/api/submit-test"


def _submitted_snapshot():
    manager = ExamManager()
    manager.install_questions(make_questions("A", "B"))
    manager.start()
    manager.select_answer("q1", "A")
    manager.advance()
    return manager.submit()


def test_report_posts_final_questions_on_background_thread() -> None:
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"message": "saved"})

    reporter = ResultReporter(url=_URL, timeout=1.0, transport=httpx.MockTransport(handler))
    thread = reporter.report(_submitted_snapshot())
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert bodies == [
        {
            "questions": [
                {
                    "id": "q1",
                    "question": "Question 1?",
                    "options": ["A", "B", "C", "D"],
                    "correctAnswer": "A",
                    "status": "ANSWERED",
                    "selectedAnswers": "A",
                },
                {
                    "id": "q2",
                    "question": "Question 2?",
                    "options": ["A", "B", "C", "D"],
                    "correctAnswer": "B",
                    "status": "NOT_ANSWERED",
                    "selectedAnswers": None,
                },
            ]
        }
    ]


def test_deliver_logs_and_swallows_http_errors(caplog: pytest.LogCaptureFixture) -> None:
    reporter = ResultReporter(
        url=_URL,
        timeout=1.0,
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )
    with caplog.at_level(logging.WARNING, logger="exam_app.core.result_reporter"):
        delivered = reporter.deliver({"questions": []})

    assert delivered is False
    assert "Error saving test results" in caplog.text


def test_deliver_handles_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    reporter = ResultReporter(url=_URL, timeout=1.0, transport=httpx.MockTransport(handler))
    assert reporter.deliver({"questions": []}) is False


def test_failed_delivery_keeps_local_score() -> None:
    reporter = ResultReporter(
        url=_URL,
        timeout=1.0,
        transport=httpx.MockTransport(lambda request: httpx.Response(502)),
    )
    manager = ExamManager(reporter=reporter)
    manager.install_questions(make_questions("A"))
    manager.start()
    manager.select_answer("q1", "A")
    snapshot = manager.submit()

    assert snapshot.score.percentage == 100
    assert manager.snapshot().submitted is True
