"""Qt main window switching between the loading, welcome, exam and result views."""

from __future__ import annotations

import logging

from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from exam_app.constants.about import APP_VERSION
from exam_app.constants.ui_constants import WINDOW_TITLE
from exam_app.core.errors import ExamError, LoadError
from exam_app.core.exam_manager import ExamManager, QuestionSource
from exam_app.core.models import ExamPhase, ExamSnapshot
from exam_app.ui.components.exam_panel import ExamPanel
from exam_app.ui.components.result_panel import ResultPanel
from exam_app.ui.components.status_panel import StatusPanel
from exam_app.ui.components.welcome_panel import WelcomePanel
from exam_app.ui.dialog_helpers import confirm_submit
from exam_app.styling.styles import Styles
from exam_app.workers.countdown_driver import CountdownDriver
from exam_app.workers.load_worker import QuestionLoadWorker

logger = logging.getLogger(__name__)


class ExamMainWindow(QMainWindow):
    """Main Qt window rendering exam snapshots."""

    # Snapshots are re-emitted through a signal so rendering always runs on
    # the GUI thread.
    snapshot_ready = Signal(object)

    def __init__(self, exam_manager: ExamManager, loader: QuestionSource) -> None:
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} v{APP_VERSION}")
        self.resize(1100, 720)

        self.exam_manager = exam_manager
        self._load_in_flight = False
        self._prompt_font_size: int = 14

        self._load_worker = QuestionLoadWorker(loader, self)
        self._load_worker.loaded.connect(self._handle_questions_loaded)
        self._load_worker.failed.connect(self._handle_load_failed)

        self._build_ui()
        self._apply_styles()

        self.countdown_driver = CountdownDriver(exam_manager, parent=self)
        self.snapshot_ready.connect(self._render)
        self._unsubscribe = exam_manager.subscribe(self.snapshot_ready.emit)

        self._render(exam_manager.snapshot())
        self._request_questions()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.view_stack = QStackedWidget(self)
        self.status_panel = StatusPanel(on_retry=self._request_questions, parent=self)
        self.welcome_panel = WelcomePanel(on_start=self._handle_start, parent=self)
        self.exam_panel = ExamPanel(
            self.exam_manager,
            on_submit_requested=self._handle_submit_requested,
            parent=self,
        )
        self.result_panel = ResultPanel(self)

        self.view_stack.addWidget(self.status_panel)
        self.view_stack.addWidget(self.welcome_panel)
        self.view_stack.addWidget(self.exam_panel)
        self.view_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.view_stack)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.exam_panel.apply_font_size(self._prompt_font_size)

    # --- Loading ---

    def _request_questions(self) -> None:
        if self._load_in_flight:
            return
        try:
            self.exam_manager.begin_loading()
        except ExamError as exc:
            logger.warning("Not reloading questions: %s", exc)
            return
        self._load_in_flight = True
        self._load_worker.start()

    def _handle_questions_loaded(self, questions: list) -> None:
        self._load_in_flight = False
        try:
            self.exam_manager.install_questions(questions)
        except LoadError:
            # The manager already switched to the load-error phase.
            return

    def _handle_load_failed(self, message: str) -> None:
        self._load_in_flight = False
        self.exam_manager.record_load_failure(message)

    # --- Actions ---

    def _handle_start(self) -> None:
        try:
            self.exam_manager.start()
        except ExamError as exc:
            logger.warning("Could not start the test: %s", exc)

    def _handle_submit_requested(self) -> None:
        snapshot = self.exam_manager.snapshot()
        if snapshot.phase != ExamPhase.IN_PROGRESS:
            return
        if not confirm_submit(self, snapshot.answered_count, snapshot.question_count):
            return
        try:
            self.exam_manager.submit()
        except ExamError as exc:
            logger.warning("Could not submit the test: %s", exc)

    # --- Rendering ---

    def _render(self, snapshot: ExamSnapshot) -> None:
        phase = snapshot.phase
        if phase == ExamPhase.LOADING:
            self.status_panel.show_loading()
            self.view_stack.setCurrentWidget(self.status_panel)
        elif phase == ExamPhase.LOAD_ERROR:
            self.status_panel.show_error(snapshot.load_error)
            self.view_stack.setCurrentWidget(self.status_panel)
        elif phase == ExamPhase.READY:
            self.welcome_panel.render(snapshot)
            self.view_stack.setCurrentWidget(self.welcome_panel)
        elif phase == ExamPhase.IN_PROGRESS:
            self.exam_panel.render(snapshot)
            self.view_stack.setCurrentWidget(self.exam_panel)
        elif phase == ExamPhase.SUBMITTED:
            self.result_panel.render(snapshot)
            self.view_stack.setCurrentWidget(self.result_panel)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.countdown_driver.dispose()
        self._unsubscribe()
        self.exam_manager.close()
        super().closeEvent(event)
