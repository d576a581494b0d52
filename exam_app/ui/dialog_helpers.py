"""Helper functions for common dialog patterns in the exam UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from exam_app.constants.ui_constants import CONFIRM_SUBMIT_TEMPLATE, CONFIRM_SUBMIT_TITLE


def confirm_submit(parent: QWidget, answered: int, total: int) -> bool:
    """Ask before submitting the test.

    Args:
        parent: Parent widget for the dialog
        answered: Number of questions with a selected option
        total: Number of questions in the test

    Returns:
        True if the user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        CONFIRM_SUBMIT_TITLE,
        CONFIRM_SUBMIT_TEMPLATE.format(answered=answered, total=total),
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)
