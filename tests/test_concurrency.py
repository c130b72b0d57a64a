from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from question_gate.core.models import AlertLevel


def _burst(limiter, student_ids):
    barrier = Barrier(len(student_ids))

    def submit(student_id):
        barrier.wait()
        return limiter.submit(student_id, "Name", "name@example.com", "Same time?")

    with ThreadPoolExecutor(max_workers=len(student_ids)) as pool:
        return list(pool.map(submit, student_ids))


def test_simultaneous_submissions_respect_the_limit(limiter):
    results = _burst(limiter, ["s1"] * 40)

    levels = Counter(result.alert_level for result in results)
    assert sum(1 for result in results if result.allowed) == 3
    assert levels[AlertLevel.RATE_LIMITED] == 1
    assert levels[AlertLevel.BLOCKED] == 36

    student = limiter.get_stats("s1")
    assert student.total_questions == 3
    assert len(student.question_history) == 3
    assert student.is_blocked is True


def test_unrelated_students_do_not_interfere(limiter):
    student_ids = [f"s{i % 10}" for i in range(30)]

    results = _burst(limiter, student_ids)

    assert all(result.allowed for result in results)
    summary = limiter.get_summary()
    assert len(summary) == 10
    assert all(item.total_questions == 3 for item in summary)
    assert not any(item.is_blocked for item in summary)


def _assert_consistent(student):
    assert student.total_questions >= len(student.question_history)
    if student.is_blocked:
        assert student.blocked_until is not None


def test_reset_and_cleanup_race_with_submissions(limiter):
    limiter.submit("s1", "Name", "name@example.com", "First")
    rounds = 200
    barrier = Barrier(5)
    snapshots = []

    def submitter():
        barrier.wait()
        for index in range(rounds):
            limiter.submit("s1", "Name", "name@example.com", f"q{index}")

    def resetter():
        barrier.wait()
        for _ in range(rounds):
            limiter.reset("s1")

    def cleaner():
        barrier.wait()
        for _ in range(rounds):
            limiter.cleanup()

    def reader():
        barrier.wait()
        for _ in range(rounds):
            snapshots.append(limiter.get_stats("s1"))

    workers = [submitter, submitter, resetter, cleaner, reader]
    with ThreadPoolExecutor(max_workers=len(workers)) as pool:
        futures = [pool.submit(worker) for worker in workers]
        for future in futures:
            future.result()

    assert len(snapshots) == rounds
    for snapshot in snapshots:
        _assert_consistent(snapshot)
    final = limiter.get_stats("s1")
    _assert_consistent(final)
    assert len(final.question_history) <= 3
    # One accepted question before the race, then at most three per reset window.
    assert 1 <= final.total_questions <= 1 + 3 * (rounds + 1)
