from __future__ import annotations

from threading import Event

from conftest import ask
from question_gate.core.cleanup_scheduler import CleanupScheduler


class RecordingLimiter:
    def __init__(self, fail_first: bool = False) -> None:
        self.calls = 0
        self.fail_first = fail_first
        self.second_call = Event()

    def cleanup(self) -> int:
        self.calls += 1
        if self.calls >= 2:
            self.second_call.set()
        if self.fail_first and self.calls == 1:
            raise RuntimeError("boom")
        return 0

    def student_count(self) -> int:
        return 0


def test_run_once_prunes_old_history(limiter, clock):
    ask(limiter)
    clock.set_minutes(25 * 60)

    removed = CleanupScheduler(limiter).run_once()

    assert removed == 1
    assert limiter.get_stats("s1").question_history == []


def test_scheduler_runs_periodically_until_stopped():
    recorder = RecordingLimiter()
    scheduler = CleanupScheduler(recorder, interval_seconds=0.01)

    scheduler.start()
    try:
        assert recorder.second_call.wait(timeout=5)
        assert scheduler.is_running()
    finally:
        scheduler.stop(timeout=5)

    assert not scheduler.is_running()
    assert recorder.calls >= 2


def test_scheduler_survives_a_failed_pass(caplog):
    recorder = RecordingLimiter(fail_first=True)
    scheduler = CleanupScheduler(recorder, interval_seconds=0.01)

    scheduler.start()
    try:
        assert recorder.second_call.wait(timeout=5)
    finally:
        scheduler.stop(timeout=5)

    assert "History cleanup pass failed" in caplog.text


def test_start_is_idempotent():
    scheduler = CleanupScheduler(RecordingLimiter(), interval_seconds=60)
    first = scheduler.start()
    try:
        assert scheduler.start() is first
    finally:
        scheduler.stop(timeout=5)
