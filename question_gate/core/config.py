"""Startup configuration for the rate limiter."""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from question_gate.constants.rate_limit_constants import (
    DEFAULT_COOLDOWN_MINUTES,
    DEFAULT_HISTORY_RETENTION_HOURS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_QUESTIONS_PER_WINDOW,
    DEFAULT_TIME_WINDOW_MINUTES,
)


class RateLimitConfig(BaseSettings):
    """Process-wide limits, read once from ``QUESTION_GATE_*`` variables at startup.

    Ranges are not enforced; values that are not finite numbers are rejected.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUESTION_GATE_",
        frozen=True,
        allow_inf_nan=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    max_questions_per_window: int = Field(
        default=DEFAULT_MAX_QUESTIONS_PER_WINDOW,
        validation_alias=AliasChoices("max_questions_per_window", "QUESTION_GATE_MAX_QUESTIONS"),
    )
    time_window_minutes: float = DEFAULT_TIME_WINDOW_MINUTES
    cooldown_minutes: float = DEFAULT_COOLDOWN_MINUTES
    history_retention_hours: float = DEFAULT_HISTORY_RETENTION_HOURS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def time_window_seconds(self) -> float:
        return self.time_window_minutes * 60

    @property
    def cooldown_seconds(self) -> float:
        return self.cooldown_minutes * 60

    @property
    def history_retention_seconds(self) -> float:
        return self.history_retention_hours * 60 * 60

    def to_dict(self) -> dict[str, object]:
        return {
            "maxQuestions": self.max_questions_per_window,
            "timeWindowMinutes": self.time_window_minutes,
            "cooldownMinutes": self.cooldown_minutes,
        }
