"""Service holding the in-memory student records and their locks."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock

from question_gate.core.models import Student


@dataclass(slots=True)
class StudentSlot:
    """A student record paired with the lock that serializes access to it."""

    student: Student
    lock: Lock = field(default_factory=Lock)


class StudentRegistry:
    """Maps student ids to records, with one lock per student.

    The registry lock only guards insertion and listing. Callers must hold
    ``slot.lock`` while reading or mutating ``slot.student``.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._slots: dict[str, StudentSlot] = {}

    def get_or_create(self, student_id: str, name: str, email: str) -> StudentSlot:
        """Return the slot for ``student_id``, creating an empty record if needed."""
        with self._lock:
            slot = self._slots.get(student_id)
            if slot is None:
                slot = StudentSlot(student=Student(id=student_id, name=name, email=email))
                self._slots[student_id] = slot
            return slot

    def get(self, student_id: str) -> StudentSlot | None:
        with self._lock:
            return self._slots.get(student_id)

    def slots(self) -> list[StudentSlot]:
        with self._lock:
            return list(self._slots.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)
