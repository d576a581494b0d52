"""Component for answering questions while the countdown runs."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.about import HELP_TEXT
from exam_app.constants.exam_constants import TIME_WARNING_WINDOW_SECONDS
from exam_app.constants.ui_constants import (
    HELP_BUTTON,
    MATRIX_COLUMNS,
    NEXT_BUTTON,
    PREV_BUTTON,
    QUESTION_HEADER_TEMPLATE,
    QUESTION_MATRIX_TITLE,
    REVIEW_BUTTON,
    SUBMIT_BUTTON,
)
from exam_app.core.errors import ExamError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import ExamSnapshot, QuestionId, QuestionSnapshot, QuestionStatus
from exam_app.core.services.scoring import format_time_left
from exam_app.ui.dialog_helpers import show_info
from exam_app.ui.question_renderer import render_question_prompt
from exam_app.styling.styles import Styles

logger = logging.getLogger(__name__)

_LEGEND = (
    (QuestionStatus.ANSWERED, "ANSWERED"),
    (QuestionStatus.NOT_ANSWERED, "NOT ANSWERED"),
    (QuestionStatus.NOT_ATTEMPTED, "NOT ATTEMPTED"),
    (QuestionStatus.REVIEW, "REVIEW"),
)


class ExamPanel(QWidget):
    """Renders exam snapshots and turns user input into manager operations."""

    def __init__(
        self,
        exam_manager: ExamManager,
        on_submit_requested: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_submit_requested = on_submit_requested

        self._font_size: int = 14
        self._rendered_question_id: QuestionId | None = None
        self._option_buttons: list[QRadioButton] = []
        self._matrix_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        # Question column
        question_column = QVBoxLayout()

        header_row = QHBoxLayout()
        self.header_label = QLabel("", self)
        self.header_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.header_label)
        header_row.addStretch()
        self.timer_label = QLabel("", self)
        self.timer_label.setStyleSheet(Styles.get_timer_style(warning=False))
        header_row.addWidget(self.timer_label)
        question_column.addLayout(header_row)

        self.prompt_view = QWebEngineView(self)
        question_column.addWidget(self.prompt_view, stretch=1)

        self.options_box = QGroupBox(self)
        self.options_layout = QVBoxLayout()
        self.options_box.setLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        question_column.addWidget(self.options_box)

        control_row = QHBoxLayout()
        self.review_button = QPushButton(REVIEW_BUTTON, self)
        self.review_button.clicked.connect(self._handle_review)
        control_row.addWidget(self.review_button)

        control_row.addStretch()

        self.prev_button = QPushButton(PREV_BUTTON, self)
        self.prev_button.clicked.connect(self._handle_prev)
        control_row.addWidget(self.prev_button)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        control_row.addWidget(self.next_button)

        control_row.addStretch()

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.clicked.connect(self.on_submit_requested)
        control_row.addWidget(self.submit_button)

        question_column.addLayout(control_row)
        layout.addLayout(question_column, stretch=3)

        # Matrix column
        side_column = QVBoxLayout()
        self.matrix_group = QGroupBox(QUESTION_MATRIX_TITLE, self)
        self.matrix_layout = QGridLayout()
        self.matrix_group.setLayout(self.matrix_layout)
        side_column.addWidget(self.matrix_group)

        legend_box = QGroupBox(self)
        legend_layout = QVBoxLayout()
        legend_box.setLayout(legend_layout)
        for status, text in _LEGEND:
            row = QHBoxLayout()
            dot = QLabel("", self)
            dot.setStyleSheet(Styles.get_legend_dot_style(status))
            row.addWidget(dot)
            row.addWidget(QLabel(text, self))
            row.addStretch()
            legend_layout.addLayout(row)
        side_column.addWidget(legend_box)

        side_column.addStretch()
        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(lambda: show_info(self, HELP_BUTTON, HELP_TEXT))
        side_column.addWidget(self.help_button)

        layout.addLayout(side_column, stretch=1)

    # --- Rendering ---

    def render(self, snapshot: ExamSnapshot) -> None:
        current = snapshot.current_question
        if current is None:
            return
        self.header_label.setText(
            QUESTION_HEADER_TEMPLATE.format(
                number=current.index + 1, total=snapshot.question_count
            )
        )
        self.render_time(snapshot.time_left_seconds)
        if current.question.id != self._rendered_question_id:
            self._rebuild_question(current)
        self._sync_selection(current)
        self._render_matrix(snapshot)

        self.prev_button.setEnabled(snapshot.current_index > 0)
        self.next_button.setEnabled(True)

    def render_time(self, seconds: int) -> None:
        self.timer_label.setText(format_time_left(seconds))
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(warning=seconds <= TIME_WARNING_WINDOW_SECONDS)
        )

    def reset_state(self) -> None:
        self._rendered_question_id = None
        self._clear_options()

    def _rebuild_question(self, current: QuestionSnapshot) -> None:
        self._rendered_question_id = current.question.id
        self.prompt_view.setHtml(render_question_prompt(current.question.text, self._font_size))
        self._clear_options()
        for option in current.question.options:
            button = QRadioButton(option, self.options_box)
            button.clicked.connect(
                lambda _checked=False, qid=current.question.id, value=option: self._handle_select(qid, value)
            )
            self.option_group.addButton(button)
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def _clear_options(self) -> None:
        for button in self._option_buttons:
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

    def _sync_selection(self, current: QuestionSnapshot) -> None:
        # Exclusive groups refuse to uncheck the last button directly.
        self.option_group.setExclusive(False)
        for button in self._option_buttons:
            button.blockSignals(True)
            button.setChecked(button.text() == current.selected_option)
            button.blockSignals(False)
        self.option_group.setExclusive(True)

    def _render_matrix(self, snapshot: ExamSnapshot) -> None:
        if len(self._matrix_buttons) != snapshot.question_count:
            self._rebuild_matrix(snapshot.question_count)
        for entry, button in zip(snapshot.questions, self._matrix_buttons):
            button.setStyleSheet(
                Styles.get_matrix_button_style(
                    entry.status, is_current=entry.index == snapshot.current_index
                )
            )
            button.setToolTip(entry.status.value.replace("_", " "))

    def _rebuild_matrix(self, count: int) -> None:
        for button in self._matrix_buttons:
            self.matrix_layout.removeWidget(button)
            button.deleteLater()
        self._matrix_buttons = []
        for index in range(count):
            button = QPushButton(str(index + 1), self.matrix_group)
            button.clicked.connect(lambda _checked=False, target=index: self._handle_jump(target))
            row, column = divmod(index, MATRIX_COLUMNS)
            self.matrix_layout.addWidget(button, row, column)
            self._matrix_buttons.append(button)

    # --- Input handlers ---

    def _handle_select(self, question_id: QuestionId, option: str) -> None:
        self._run(lambda: self.exam_manager.select_answer(question_id, option))

    def _handle_next(self) -> None:
        self._run(self.exam_manager.advance)

    def _handle_prev(self) -> None:
        self._run(self.exam_manager.retreat)

    def _handle_review(self) -> None:
        self._run(self.exam_manager.mark_for_review)

    def _handle_jump(self, index: int) -> None:
        self._run(lambda: self.exam_manager.jump_to(index))

    def _run(self, operation: callable) -> None:
        # Rendering happens through the snapshot subscription.
        try:
            operation()
        except ExamError as exc:
            logger.warning("Ignored exam action: %s", exc)

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        style = f"font-size: {font_size}pt;"
        self.options_box.setStyleSheet(style)
        self._rendered_question_id = None
