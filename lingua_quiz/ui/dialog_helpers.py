"""Helper functions for common dialog patterns in the learner UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_submit(parent: QWidget, unanswered_count: int) -> bool:
    """Ask before submitting a quiz that still has unanswered questions.

    Args:
        parent: Parent widget for the dialog
        unanswered_count: Number of questions without an answer

    Returns:
        True if user confirmed, False otherwise
    """
    if unanswered_count <= 0:
        return True
    reply = QMessageBox.question(
        parent,
        "Submit Quiz",
        f"{unanswered_count} question(s) are unanswered and will count as incorrect. Submit anyway?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def confirm_abandon_attempt(parent: QWidget) -> bool:
    """Ask before dropping an attempt that is still running."""
    reply = QMessageBox.question(
        parent,
        "Leave Quiz",
        "Your current attempt will be discarded. Continue?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
