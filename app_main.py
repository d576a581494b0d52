"""Application entry point for ExamQt."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from exam_app.constants.network_constants import (
    LOCAL_BANK_FILE,
    LOCAL_HOST,
    LOCAL_PORT,
    QUESTION_BANK_URL,
    RESULT_SUBMISSION_URL,
)
from exam_app.core.exam_manager import ExamManager
from exam_app.core.question_importer import QuestionImportError, load_questions_from_file
from exam_app.core.question_loader import QuestionBankLoader
from exam_app.core.result_reporter import ResultReporter
from exam_app.server.api_server import start_api_server
from exam_app.ui.exam_main_window import ExamMainWindow
from exam_app.utils.logging_config import configure_logging


def _maybe_start_local_bank(logger: logging.Logger) -> None:
    """Serve the local question file when one is present."""
    bank_path = Path(LOCAL_BANK_FILE)
    if not bank_path.exists():
        logger.info("No local question file at %s; using %s", bank_path, QUESTION_BANK_URL)
        return
    try:
        questions = load_questions_from_file(bank_path)
    except (OSError, QuestionImportError) as exc:
        logger.error("Local question file %s rejected: %s", bank_path, exc)
        return
    start_api_server(questions, host=LOCAL_HOST, port=LOCAL_PORT)
    logger.info("Serving %d local questions on http://%s:%d/", len(questions), LOCAL_HOST, LOCAL_PORT)


def main() -> None:
    """Initialize logging, optionally start the local bank, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting ExamQt...")

    _maybe_start_local_bank(logger)

    exam_manager = ExamManager(reporter=ResultReporter(RESULT_SUBMISSION_URL))
    loader = QuestionBankLoader(QUESTION_BANK_URL)

    app = QApplication(sys.argv)
    window = ExamMainWindow(exam_manager=exam_manager, loader=loader)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
