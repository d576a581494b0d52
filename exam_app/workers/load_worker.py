"""Background question loading that reports back through Qt signals."""

from __future__ import annotations

import logging
from threading import Thread

from PySide6.QtCore import QObject, Signal

from exam_app.core.errors import LoadError
from exam_app.core.exam_manager import QuestionSource

logger = logging.getLogger(__name__)


class QuestionLoadWorker(QObject):
    """Runs the loader off the GUI thread; results arrive as queued signals.

    Every run ends with exactly one of ``loaded`` or ``failed``.
    """

    loaded = Signal(object)
    failed = Signal(str)

    def __init__(self, loader: QuestionSource, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._loader = loader

    def start(self) -> Thread:
        thread = Thread(target=self._run, name="QuestionLoader", daemon=True)
        thread.start()
        return thread

    def _run(self) -> None:
        try:
            questions = self._loader.load()
        except LoadError as exc:
            self.failed.emit(str(exc))
            return
        except Exception as exc:
            logger.exception("Unexpected error while loading questions")
            self.failed.emit(f"Unexpected error while loading questions: {exc}")
            return
        self.loaded.emit(questions)
