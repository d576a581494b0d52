"""Component shown while questions load or after loading failed."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import (
    LOAD_ERROR_MESSAGE,
    LOAD_ERROR_TITLE,
    LOADING_MESSAGE,
    LOADING_TITLE,
    RETRY_BUTTON,
)
from exam_app.styling.styles import Styles


class StatusPanel(QWidget):
    """Loading indicator that turns into a blocking error screen with retry."""

    def __init__(self, on_retry: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_retry = on_retry
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(LOADING_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.message_label = QLabel(LOADING_MESSAGE, self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.detail_label = QLabel("", self)
        self.detail_label.setAlignment(Qt.AlignCenter)
        self.detail_label.setWordWrap(True)
        self.detail_label.setStyleSheet(Styles.get_error_label_style())
        self.detail_label.setVisible(False)
        layout.addWidget(self.detail_label)

        self.retry_button = QPushButton(RETRY_BUTTON, self)
        self.retry_button.setStyleSheet(Styles.get_primary_button_style())
        self.retry_button.clicked.connect(self.on_retry)
        self.retry_button.setVisible(False)
        layout.addWidget(self.retry_button, alignment=Qt.AlignCenter)

    def show_loading(self) -> None:
        self.title_label.setText(LOADING_TITLE)
        self.message_label.setText(LOADING_MESSAGE)
        self.detail_label.setVisible(False)
        self.retry_button.setVisible(False)

    def show_error(self, detail: str | None) -> None:
        self.title_label.setText(LOAD_ERROR_TITLE)
        self.message_label.setText(LOAD_ERROR_MESSAGE)
        self.detail_label.setText(detail or "")
        self.detail_label.setVisible(bool(detail))
        self.retry_button.setVisible(True)
