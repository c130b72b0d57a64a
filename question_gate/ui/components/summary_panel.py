"""Component listing every student with their current question activity."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from question_gate.constants.ui_constants import (
    STATUS_ACTIVE,
    STATUS_BLOCKED,
    SUMMARY_COLUMNS,
    SUMMARY_COUNT_TEMPLATE,
    SUMMARY_EMPTY_STATE,
)
from question_gate.core.models import StudentSummary
from question_gate.styling.styles import Styles


class SummaryPanel(QWidget):
    """Table of students, refreshed from ``StudentRateLimiter.get_summary``."""

    def __init__(self, max_questions: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._max_questions = max_questions
        self._snapshot: list[StudentSummary] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.count_label = QLabel(SUMMARY_COUNT_TEMPLATE.format(count=0, blocked=0), self)
        layout.addWidget(self.count_label)

        self.table = QTableWidget(0, len(SUMMARY_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(SUMMARY_COLUMNS))
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table, stretch=1)

        self.empty_label = QLabel(SUMMARY_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

    def refresh(self, summaries: list[StudentSummary]) -> None:
        if summaries == self._snapshot:
            return
        selected_id = self.selected_student_id()
        self._snapshot = list(summaries)

        self.table.setRowCount(len(summaries))
        for row, summary in enumerate(summaries):
            status = STATUS_BLOCKED if summary.is_blocked else STATUS_ACTIVE
            values = (
                summary.id,
                summary.name,
                str(summary.total_questions),
                f"{summary.questions_in_window}/{self._max_questions}",
                status,
            )
            for column, value in enumerate(values):
                self.table.setItem(row, column, QTableWidgetItem(value))
            near_limit = summary.questions_in_window >= self._max_questions - 1
            color = Styles.get_status_color(summary.is_blocked, near_limit)
            self.table.item(row, len(values) - 1).setForeground(QColor(color))
            if summary.id == selected_id:
                self.table.selectRow(row)

        blocked = sum(1 for summary in summaries if summary.is_blocked)
        self.count_label.setText(SUMMARY_COUNT_TEMPLATE.format(count=len(summaries), blocked=blocked))
        self.empty_label.setVisible(not summaries)

    def selected_student(self) -> StudentSummary | None:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        row = rows[0].row()
        if row >= len(self._snapshot):
            return None
        return self._snapshot[row]

    def selected_student_id(self) -> str | None:
        selected = self.selected_student()
        return selected.id if selected else None
