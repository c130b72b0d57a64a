"""Domain models for the question rate limiter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class AlertLevel(str, Enum):
    """Severity attached to the outcome of a submission attempt."""

    NORMAL = "NORMAL"
    WARNING = "WARNING"
    BLOCKED = "BLOCKED"
    RATE_LIMITED = "RATE_LIMITED"


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """A single accepted question, timestamped in epoch seconds."""

    timestamp: float
    question: str

    def to_dict(self) -> dict[str, object]:
        return {"timestamp": self.timestamp, "question": self.question}


@dataclass(slots=True)
class Student:
    """Per-student state: identity plus the sliding-window ledger."""

    id: str
    name: str
    email: str
    question_history: list[QuestionRecord] = field(default_factory=list)
    total_questions: int = 0
    is_blocked: bool = False
    blocked_until: float | None = None

    def snapshot(self) -> Student:
        """Return a copy that no longer shares the history list."""
        return replace(self, question_history=list(self.question_history))

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "questionHistory": [record.to_dict() for record in self.question_history],
            "totalQuestions": self.total_questions,
            "isBlocked": self.is_blocked,
            "blockedUntil": self.blocked_until,
        }


@dataclass(frozen=True, slots=True)
class AlertResult:
    """Outcome of a submission. Optional fields stay None when not applicable."""

    allowed: bool
    message: str
    remaining_questions: int | None = None
    cooldown_until: float | None = None
    alert_level: AlertLevel | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"allowed": self.allowed, "message": self.message}
        if self.remaining_questions is not None:
            payload["remainingQuestions"] = self.remaining_questions
        if self.cooldown_until is not None:
            payload["cooldownUntil"] = self.cooldown_until
        if self.alert_level is not None:
            payload["alertLevel"] = self.alert_level.value
        return payload


@dataclass(frozen=True, slots=True)
class StudentSummary:
    """Dashboard row describing one student at a point in time."""

    id: str
    name: str
    total_questions: int
    is_blocked: bool
    questions_in_window: int

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "totalQuestions": self.total_questions,
            "isBlocked": self.is_blocked,
            "questionsInWindow": self.questions_in_window,
        }
