"""Background thread that periodically prunes old question history."""

from __future__ import annotations

import logging
from threading import Event, Thread

from question_gate.constants.rate_limit_constants import CLEANUP_INTERVAL_SECONDS
from question_gate.core.rate_limiter import StudentRateLimiter

logger = logging.getLogger(__name__)


class CleanupScheduler:
    """Runs ``StudentRateLimiter.cleanup`` every ``interval_seconds`` until stopped."""

    def __init__(
        self,
        rate_limiter: StudentRateLimiter,
        interval_seconds: float = CLEANUP_INTERVAL_SECONDS,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._interval_seconds = interval_seconds
        self._stop_event = Event()
        self._thread: Thread | None = None

    def start(self) -> Thread:
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._stop_event.clear()
        self._thread = Thread(target=self._run, name="HistoryCleanup", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        removed = self._rate_limiter.cleanup()
        logger.info(
            "History cleanup removed %d entries across %d students",
            removed,
            self._rate_limiter.student_count(),
        )
        return removed

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval_seconds):
            try:
                self.run_once()
            except Exception:
                logger.exception("History cleanup pass failed")
