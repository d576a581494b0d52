from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Question
from exam_fixtures import RecordingReporter, make_questions


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def questions() -> list[Question]:
    return make_questions("A", "B", "C")


@pytest.fixture
def manager(reporter: RecordingReporter, questions: list[Question]) -> ExamManager:
    exam_manager = ExamManager(reporter=reporter)
    exam_manager.install_questions(questions)
    return exam_manager


@pytest.fixture
def started_manager(manager: ExamManager) -> ExamManager:
    manager.start()
    return manager
