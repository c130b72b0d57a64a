"""Helper functions for common dialog patterns in the dashboard."""

from __future__ import annotations

from datetime import datetime

from PySide6.QtWidgets import QMessageBox, QWidget

from question_gate.core.models import Student


def confirm_reset_student(parent: QWidget, student_name: str, student_id: str) -> bool:
    """Ask before clearing a student's question history and cooldown.

    Returns:
        True if the teacher confirmed, False otherwise
    """
    label = f"{student_name} ({student_id})" if student_name else student_id
    reply = QMessageBox.question(
        parent,
        "Confirm Reset",
        f"Clear the question history and any cooldown for {label}?\n"
        "Their all-time question total is kept.",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def format_student_details(student: Student) -> str:
    """Render a student's record as plain text for the details dialog."""
    lines = [
        f"Name: {student.name or '-'}",
        f"Email: {student.email or '-'}",
        f"Total questions: {student.total_questions}",
    ]
    if student.is_blocked and student.blocked_until is not None:
        until = datetime.fromtimestamp(student.blocked_until).strftime("%H:%M:%S")
        lines.append(f"Blocked until: {until}")
    else:
        lines.append("Status: active")
    lines.append("")
    if not student.question_history:
        lines.append("No questions in recent history.")
    for record in student.question_history:
        asked_at = datetime.fromtimestamp(record.timestamp).strftime("%H:%M:%S")
        lines.append(f"[{asked_at}] {record.question}")
    return "\n".join(lines)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
