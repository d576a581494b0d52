"""Fire-and-forget delivery of finished tests to the result collector."""

from __future__ import annotations

import logging
from threading import Thread

import httpx

from exam_app.constants.network_constants import REPORT_TIMEOUT_SECONDS, RESULT_SUBMISSION_URL
from exam_app.core.models import ExamSnapshot
from exam_app.core.schemas import SubmissionPayload

logger = logging.getLogger(__name__)


class ResultReporter:
    """Posts the final snapshot on a background thread and only logs failures."""

    def __init__(
        self,
        url: str = RESULT_SUBMISSION_URL,
        timeout: float = REPORT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def report(self, snapshot: ExamSnapshot) -> Thread:
        payload = SubmissionPayload.from_snapshot(snapshot).to_wire()
        thread = Thread(
            target=self.deliver,
            args=(payload,),
            name="ExamResultReporter",
            daemon=True,
        )
        thread.start()
        return thread

    def deliver(self, payload: dict[str, object]) -> bool:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(self._url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Error saving test results to %s: %s", self._url, exc)
            return False
        logger.info("Test results saved (HTTP %d)", response.status_code)
        return True
