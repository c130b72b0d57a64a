"""Qt main window for monitoring students and lifting cooldowns."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from question_gate.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from question_gate.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_CLEANUP,
    BUTTON_DETAILS,
    BUTTON_RESET,
    LIMITS_TEMPLATE,
    NO_STUDENT_SELECTED_MESSAGE,
    STUDENT_URL_PLACEHOLDER,
    SUMMARY_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from question_gate.core.cleanup_scheduler import CleanupScheduler
from question_gate.core.rate_limiter import StudentNotFoundError, StudentRateLimiter
from question_gate.styling.styles import Styles
from question_gate.ui.components.summary_panel import SummaryPanel
from question_gate.ui.dialog_helpers import (
    confirm_reset_student,
    format_student_details,
    show_info,
    show_warning,
)


class TeacherDashboardWindow(QMainWindow):
    """Main window: student table plus reset, details and cleanup actions."""

    def __init__(
        self,
        rate_limiter: StudentRateLimiter,
        cleanup_scheduler: CleanupScheduler,
        student_url: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(800, 520)

        self.rate_limiter = rate_limiter
        self.cleanup_scheduler = cleanup_scheduler
        self.student_url = student_url or STUDENT_URL_PLACEHOLDER

        self._build_ui()
        self._configure_refresh_timer()
        self.setStyleSheet(Styles.get_main_window_style())
        self._refresh_summary()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.network_label = QLabel(f"Students ask at: {self.student_url}", self)
        self.network_label.setWordWrap(True)
        self.network_label.setStyleSheet(Styles.get_large_label_style())
        root_layout.addWidget(self.network_label)

        config = self.rate_limiter.get_config()
        self.limits_label = QLabel(
            LIMITS_TEMPLATE.format(
                max_questions=config.max_questions_per_window,
                window=config.time_window_minutes,
                cooldown=config.cooldown_minutes,
            ),
            self,
        )
        self.limits_label.setStyleSheet(Styles.get_secondary_label_style())
        root_layout.addWidget(self.limits_label)

        self.summary_panel = SummaryPanel(config.max_questions_per_window, self)
        root_layout.addWidget(self.summary_panel, stretch=1)

        self._build_action_buttons(root_layout)

    def _build_action_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.reset_button = QPushButton(BUTTON_RESET, self)
        self.reset_button.clicked.connect(self._handle_reset)
        button_row.addWidget(self.reset_button)

        self.details_button = QPushButton(BUTTON_DETAILS, self)
        self.details_button.clicked.connect(self._handle_details)
        button_row.addWidget(self.details_button)

        self.cleanup_button = QPushButton(BUTTON_CLEANUP, self)
        self.cleanup_button.clicked.connect(self._handle_cleanup)
        button_row.addWidget(self.cleanup_button)

        button_row.addStretch(1)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(SUMMARY_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_summary)
        self.refresh_timer.start()

    def _refresh_summary(self) -> None:
        self.summary_panel.refresh(self.rate_limiter.get_summary())

    def _handle_reset(self) -> None:
        selected = self.summary_panel.selected_student()
        if selected is None:
            show_warning(self, "No student", NO_STUDENT_SELECTED_MESSAGE)
            return
        if not confirm_reset_student(self, selected.name, selected.id):
            return
        try:
            self.rate_limiter.reset(selected.id)
        except StudentNotFoundError as exc:
            show_warning(self, "Reset failed", str(exc))
            return
        self._refresh_summary()

    def _handle_details(self) -> None:
        student_id = self.summary_panel.selected_student_id()
        if student_id is None:
            show_warning(self, "No student", NO_STUDENT_SELECTED_MESSAGE)
            return
        try:
            student = self.rate_limiter.get_stats(student_id)
        except StudentNotFoundError as exc:
            show_warning(self, "Student not found", str(exc))
            return
        show_info(self, f"Student {student.id}", format_student_details(student))

    def _handle_cleanup(self) -> None:
        removed = self.cleanup_scheduler.run_once()
        self._refresh_summary()
        show_info(self, "Cleanup finished", f"Removed {removed} old question(s) from history.")

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)
