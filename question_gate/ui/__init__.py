"""Qt UI components for the teacher dashboard."""

from .dialog_helpers import (
    confirm_reset_student,
    format_student_details,
    show_info,
    show_warning,
)
from .teacher_dashboard_window import TeacherDashboardWindow

__all__ = [
    "TeacherDashboardWindow",
    "confirm_reset_student",
    "format_student_details",
    "show_info",
    "show_warning",
]
