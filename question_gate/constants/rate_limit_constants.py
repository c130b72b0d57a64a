"""Default limits for question pacing. Overridable through QUESTION_GATE_* variables."""

DEFAULT_MAX_QUESTIONS_PER_WINDOW: int = 3
DEFAULT_TIME_WINDOW_MINUTES: float = 10.0
DEFAULT_COOLDOWN_MINUTES: float = 5.0
DEFAULT_HISTORY_RETENTION_HOURS: float = 24.0
DEFAULT_LOG_LEVEL: str = "INFO"
CLEANUP_INTERVAL_SECONDS: float = 60 * 60

QUESTION_ACCEPTED_MESSAGE: str = "Question submitted successfully."
