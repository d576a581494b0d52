"""Component introducing the test before the timer starts."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import START_BUTTON, WELCOME_TEMPLATE, WELCOME_TITLE
from exam_app.core.models import ExamSnapshot
from exam_app.styling.styles import Styles


class WelcomePanel(QWidget):
    def __init__(self, on_start: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        title = QLabel(WELCOME_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.description_label = QLabel("", self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

    def render(self, snapshot: ExamSnapshot) -> None:
        minutes = snapshot.time_left_seconds // 60
        self.description_label.setText(
            WELCOME_TEMPLATE.format(count=snapshot.question_count, minutes=minutes)
        )
