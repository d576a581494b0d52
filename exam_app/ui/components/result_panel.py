"""Component showing the frozen score after submission."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import (
    AUTO_SUBMITTED_MESSAGE,
    RESULT_DETAIL_TEMPLATE,
    RESULT_SCORE_HEADING,
    RESULT_TITLE,
)
from exam_app.core.models import ExamSnapshot
from exam_app.core.services.scoring import grade_for
from exam_app.styling.styles import Styles


class ResultPanel(QWidget):
    """Read-only summary of a submitted test."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        for text, style in (
            (RESULT_TITLE, "font-size: 22pt; font-weight: bold;"),
            (RESULT_SCORE_HEADING, Styles.get_large_label_style()),
        ):
            label = QLabel(text, self)
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(style)
            layout.addWidget(label)

        self.percentage_label = QLabel("", self)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        self.percentage_label.setStyleSheet("font-size: 36pt; font-weight: bold;")
        layout.addWidget(self.percentage_label)

        self.grade_label = QLabel("", self)
        self.grade_label.setAlignment(Qt.AlignCenter)
        self.grade_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.grade_label)

        self.detail_label = QLabel("", self)
        self.detail_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.detail_label)

        self.auto_submit_label = QLabel(AUTO_SUBMITTED_MESSAGE, self)
        self.auto_submit_label.setAlignment(Qt.AlignCenter)
        self.auto_submit_label.setVisible(False)
        layout.addWidget(self.auto_submit_label)

    def render(self, snapshot: ExamSnapshot) -> None:
        summary = snapshot.score
        if summary is None:
            return
        self.percentage_label.setText(f"{summary.percentage}%")
        self.grade_label.setText(grade_for(summary.percentage))
        self.detail_label.setText(
            RESULT_DETAIL_TEMPLATE.format(correct=summary.correct, total=summary.total)
        )
        self.auto_submit_label.setVisible(snapshot.auto_submitted)
