"""HTTP client that retrieves the question set for a session."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from exam_app.constants.network_constants import LOAD_TIMEOUT_SECONDS, QUESTION_BANK_URL
from exam_app.core.errors import LoadError
from exam_app.core.models import Question
from exam_app.core.schemas import QUESTION_LIST_ADAPTER

logger = logging.getLogger(__name__)


class QuestionBankLoader:
    """Fetches the ordered question list with a single parameterless GET.

    The loader keeps no state between calls, so retrying after a failure is
    always safe.
    """

    def __init__(
        self,
        url: str = QUESTION_BANK_URL,
        timeout: float = LOAD_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    def load(self) -> list[Question]:
        logger.info("Fetching questions from %s", self._url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self._url)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise LoadError(f"Could not retrieve questions: {exc}") from exc
        except ValueError as exc:
            raise LoadError("The question bank returned a malformed response.") from exc

        try:
            records = QUESTION_LIST_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            raise LoadError(
                f"The question bank returned {exc.error_count()} invalid question field(s)."
            ) from exc

        if not records:
            raise LoadError("The question bank returned no questions.")
        logger.info("Received %d questions", len(records))
        return [record.to_question() for record in records]
