"""Qt periodic task that feeds one-second ticks into the exam manager."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from exam_app.constants.exam_constants import TICK_INTERVAL_MS
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import ExamPhase, ExamSnapshot


class CountdownDriver(QObject):
    """Runs a QTimer while the test is in progress.

    The timer lives on the GUI thread, so ticks never interleave with user
    actions; it is stopped as soon as a snapshot reports the test submitted
    or the session closed.
    """

    def __init__(
        self,
        exam_manager: ExamManager,
        interval_ms: int = TICK_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._handle_timeout)
        self._unsubscribe = exam_manager.subscribe(self._handle_snapshot)

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def dispose(self) -> None:
        self.stop()
        self._unsubscribe()

    def _handle_timeout(self) -> None:
        if not self._timer.isActive():
            return
        self.exam_manager.tick()

    def _handle_snapshot(self, snapshot: ExamSnapshot) -> None:
        if snapshot.phase == ExamPhase.IN_PROGRESS:
            self.start()
        elif snapshot.phase in (ExamPhase.SUBMITTED, ExamPhase.CLOSED):
            self.stop()
