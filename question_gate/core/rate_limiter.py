"""Business logic for pacing student questions, shared between UI and API."""

from __future__ import annotations

from collections.abc import Callable
import logging
import math
import time

from question_gate.constants.rate_limit_constants import QUESTION_ACCEPTED_MESSAGE
from question_gate.core.config import RateLimitConfig
from question_gate.core.models import (
    AlertLevel,
    AlertResult,
    QuestionRecord,
    Student,
    StudentSummary,
)
from question_gate.core.services.student_registry import StudentRegistry

logger = logging.getLogger(__name__)


class StudentNotFoundError(LookupError):
    """Raised when an operation references a student id with no record."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student {student_id!r} not found.")
        self.student_id = student_id


class StudentRateLimiter:
    """Tracks questions per student in a sliding window and enforces cooldowns.

    Every operation on a student runs under that student's lock, so the
    unblock check, the prune and the limit check of one submission happen
    atomically while other students proceed in parallel.
    """

    def __init__(
        self,
        config: RateLimitConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config or RateLimitConfig()
        self._clock = clock
        self._registry = StudentRegistry()

    def get_config(self) -> RateLimitConfig:
        return self._config

    def submit(
        self,
        student_id: str,
        student_name: str,
        student_email: str,
        question_text: str,
    ) -> AlertResult:
        """Record a question if the student is within limits."""
        slot = self._registry.get_or_create(student_id, student_name, student_email)
        with slot.lock:
            student = slot.student
            student.name = student_name
            student.email = student_email
            now = self._clock()

            if student.is_blocked:
                if student.blocked_until is not None and now < student.blocked_until:
                    remaining_minutes = math.ceil((student.blocked_until - now) / 60)
                    return AlertResult(
                        allowed=False,
                        message=(
                            "You are temporarily blocked from asking questions. "
                            f"Please wait {remaining_minutes} more minute(s)."
                        ),
                        cooldown_until=student.blocked_until,
                        alert_level=AlertLevel.BLOCKED,
                    )
                student.is_blocked = False
                student.blocked_until = None
                logger.info("Cooldown elapsed for student %s", student_id)

            self._prune(student, now - self._config.time_window_seconds)
            questions_in_window = len(student.question_history)
            max_questions = self._config.max_questions_per_window

            if questions_in_window >= max_questions:
                student.is_blocked = True
                student.blocked_until = now + self._config.cooldown_seconds
                logger.info(
                    "Blocking student %s until %.0f (%d questions in window, limit %d)",
                    student_id,
                    student.blocked_until,
                    questions_in_window,
                    max_questions,
                )
                return AlertResult(
                    allowed=False,
                    message=(
                        f"You have asked {questions_in_window} questions in the last "
                        f"{self._config.time_window_minutes:g} minutes (limit: {max_questions}). "
                        f"Please wait {self._config.cooldown_minutes:g} minutes before asking again."
                    ),
                    cooldown_until=student.blocked_until,
                    alert_level=AlertLevel.RATE_LIMITED,
                )

            student.question_history.append(QuestionRecord(timestamp=now, question=question_text))
            student.total_questions += 1
            asked = questions_in_window + 1
            alert_level = AlertLevel.WARNING if asked >= max_questions - 1 else AlertLevel.NORMAL
            logger.debug(
                "Accepted question from %s (%d/%d in window)", student_id, asked, max_questions
            )
            return AlertResult(
                allowed=True,
                message=QUESTION_ACCEPTED_MESSAGE,
                remaining_questions=max_questions - asked,
                alert_level=alert_level,
            )

    def get_stats(self, student_id: str) -> Student:
        """Return a copy of the stored record exactly as it is, without pruning."""
        slot = self._registry.get(student_id)
        if slot is None:
            raise StudentNotFoundError(student_id)
        with slot.lock:
            return slot.student.snapshot()

    def get_summary(self) -> list[StudentSummary]:
        """Summarize every student. Window counts are computed without pruning."""
        cutoff = self._clock() - self._config.time_window_seconds
        summaries: list[StudentSummary] = []
        for slot in self._registry.slots():
            with slot.lock:
                student = slot.student
                summaries.append(
                    StudentSummary(
                        id=student.id,
                        name=student.name,
                        total_questions=student.total_questions,
                        is_blocked=student.is_blocked,
                        questions_in_window=sum(
                            1 for record in student.question_history if record.timestamp > cutoff
                        ),
                    )
                )
        return summaries

    def reset(self, student_id: str) -> None:
        """Clear history and block state. Identity and the all-time total stay."""
        slot = self._registry.get(student_id)
        if slot is None:
            raise StudentNotFoundError(student_id)
        with slot.lock:
            slot.student.question_history.clear()
            slot.student.is_blocked = False
            slot.student.blocked_until = None
        logger.info("Reset student %s", student_id)

    def cleanup(self) -> int:
        """Drop history older than the retention period. Returns entries removed."""
        cutoff = self._clock() - self._config.history_retention_seconds
        removed = 0
        for slot in self._registry.slots():
            with slot.lock:
                removed += self._prune(slot.student, cutoff)
        return removed

    def student_count(self) -> int:
        return len(self._registry)

    @staticmethod
    def _prune(student: Student, cutoff: float) -> int:
        """Remove entries at or before ``cutoff``; return how many were removed."""
        kept = [record for record in student.question_history if record.timestamp > cutoff]
        removed = len(student.question_history) - len(kept)
        if removed:
            student.question_history[:] = kept
        return removed
