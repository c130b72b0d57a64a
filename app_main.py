"""Application entry point for QuestionGate."""

from __future__ import annotations

import argparse
import socket
import sys

from question_gate.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from question_gate.core.cleanup_scheduler import CleanupScheduler
from question_gate.core.config import RateLimitConfig
from question_gate.core.rate_limiter import StudentRateLimiter
from question_gate.server.api_server import start_api_server
from question_gate.utils.logging_config import configure_logging


def _determine_student_url(port: int) -> str:
    """Best-effort determination of the local IP for student-facing URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classroom question rate limiter.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run only the HTTP API, without the teacher dashboard.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, start the API server and cleanup, then the dashboard."""
    args = _parse_args(argv)
    config = RateLimitConfig()
    logger = configure_logging(config.log_level)

    logger.info(
        "Starting QuestionGate: %d question(s) per %g min, cooldown %g min",
        config.max_questions_per_window,
        config.time_window_minutes,
        config.cooldown_minutes,
    )

    rate_limiter = StudentRateLimiter(config)
    cleanup_scheduler = CleanupScheduler(rate_limiter)
    cleanup_scheduler.start()
    server_thread = start_api_server(rate_limiter=rate_limiter, host=args.host, port=args.port)
    student_url = _determine_student_url(args.port)
    logger.info("Student page available at %s", student_url)

    if args.headless:
        try:
            server_thread.join()
        except KeyboardInterrupt:
            logger.info("Shutting down")
        finally:
            cleanup_scheduler.stop()
        return

    from PySide6.QtWidgets import QApplication

    from question_gate.ui.teacher_dashboard_window import TeacherDashboardWindow

    app = QApplication(sys.argv)
    window = TeacherDashboardWindow(
        rate_limiter=rate_limiter,
        cleanup_scheduler=cleanup_scheduler,
        student_url=student_url,
    )
    window.show()
    exit_code = app.exec()
    cleanup_scheduler.stop()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
