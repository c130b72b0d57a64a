"""Shared fixtures: a controllable clock, a limiter bound to it and an API client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from question_gate.core.config import RateLimitConfig
from question_gate.core.rate_limiter import StudentRateLimiter
from question_gate.server.api_server import create_api_app

START_TIME = 1_700_000_000.0


class FakeClock:
    """Manually advanced epoch-seconds clock."""

    def __init__(self, start: float = START_TIME) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_minutes(self, minutes: float) -> None:
        self.now += minutes * 60

    def set_minutes(self, minutes: float) -> None:
        self.now = START_TIME + minutes * 60


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config() -> RateLimitConfig:
    return RateLimitConfig(max_questions_per_window=3, time_window_minutes=10.0, cooldown_minutes=5.0)


@pytest.fixture()
def limiter(config: RateLimitConfig, clock: FakeClock) -> StudentRateLimiter:
    return StudentRateLimiter(config, clock=clock)


@pytest.fixture()
def client(limiter: StudentRateLimiter) -> TestClient:
    return TestClient(create_api_app(limiter))


def ask(limiter: StudentRateLimiter, student_id: str = "s1", question: str = "Why?"):
    return limiter.submit(student_id, "Ada Lovelace", "ada@example.com", question)
