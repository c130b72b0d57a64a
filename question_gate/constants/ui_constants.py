"""Qt UI constants used across dashboard widgets."""

WINDOW_TITLE: str = "QuestionGate Teacher Dashboard"
STUDENT_URL_PLACEHOLDER: str = "http://<teacher-ip>:8000/"
SUMMARY_REFRESH_INTERVAL_MS: int = 1000

SUMMARY_COLUMNS: tuple[str, ...] = ("Student ID", "Name", "Total", "In Window", "Status")
STATUS_BLOCKED: str = "Blocked"
STATUS_ACTIVE: str = "Active"

BUTTON_RESET: str = "Reset Student"
BUTTON_DETAILS: str = "Show Details"
BUTTON_CLEANUP: str = "Run Cleanup Now"
BUTTON_ABOUT: str = "About"

SUMMARY_EMPTY_STATE: str = "No questions have been asked yet."
SUMMARY_COUNT_TEMPLATE: str = "{count} student(s), {blocked} blocked"
LIMITS_TEMPLATE: str = (
    "Limit: {max_questions} question(s) per {window:g} min, cooldown {cooldown:g} min"
)
NO_STUDENT_SELECTED_MESSAGE: str = "Select a student in the table first."
