"""Qt UI components for the exam application."""

from .dialog_helpers import confirm_submit, show_info
from .exam_main_window import ExamMainWindow
from .question_renderer import render_question_prompt

__all__ = [
    "ExamMainWindow",
    "confirm_submit",
    "show_info",
    "render_question_prompt",
]
