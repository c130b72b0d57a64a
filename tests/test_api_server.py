from __future__ import annotations

from conftest import START_TIME


def _payload(student_id: str = "s1", question: str = "What is a closure?") -> dict[str, str]:
    return {
        "studentId": student_id,
        "studentName": "Grace Hopper",
        "studentEmail": "grace@example.com",
        "question": question,
    }


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_student_page_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "/api/questions" in response.text


def test_config_readout(client):
    response = client.get("/api/config")

    assert response.json() == {"maxQuestions": 3, "timeWindowMinutes": 10.0, "cooldownMinutes": 5.0}


def test_submit_question_allowed(client):
    response = client.post("/api/questions", json=_payload())

    assert response.status_code == 200
    assert response.json() == {
        "allowed": True,
        "message": "Question submitted successfully.",
        "remainingQuestions": 2,
        "alertLevel": "NORMAL",
    }


def test_submit_question_rate_limited_then_blocked(client):
    for _ in range(3):
        assert client.post("/api/questions", json=_payload()).status_code == 200

    limited = client.post("/api/questions", json=_payload())
    assert limited.status_code == 200
    body = limited.json()
    assert body["allowed"] is False
    assert body["alertLevel"] == "RATE_LIMITED"
    assert body["cooldownUntil"] == START_TIME + 5 * 60
    assert "remainingQuestions" not in body

    blocked = client.post("/api/questions", json=_payload())
    assert blocked.status_code == 200
    assert blocked.json()["alertLevel"] == "BLOCKED"


def test_submit_requires_student_id_and_question(client):
    assert client.post("/api/questions", json={"studentId": "s1"}).status_code == 422
    assert client.post("/api/questions", json=_payload(question="")).status_code == 422
    assert client.post("/api/questions", json=_payload(student_id="")).status_code == 422


def test_submit_accepts_missing_name_and_email(client):
    response = client.post("/api/questions", json={"studentId": "s9", "question": "Hi?"})

    assert response.status_code == 200
    stats = client.get("/api/students/s9/stats").json()
    assert stats["name"] == ""
    assert stats["email"] == ""


def test_student_stats(client):
    client.post("/api/questions", json=_payload())

    response = client.get("/api/students/s1/stats")

    assert response.status_code == 200
    assert response.json() == {
        "id": "s1",
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "questionHistory": [{"timestamp": START_TIME, "question": "What is a closure?"}],
        "totalQuestions": 1,
        "isBlocked": False,
        "blockedUntil": None,
    }


def test_student_stats_not_found(client):
    response = client.get("/api/students/ghost/stats")

    assert response.status_code == 404
    assert "ghost" in response.json()["detail"]


def test_summary(client, clock):
    client.post("/api/questions", json=_payload("s1"))
    clock.advance_minutes(11)
    client.post("/api/questions", json=_payload("s2"))

    response = client.get("/api/students/summary")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "s1", "name": "Grace Hopper", "totalQuestions": 1, "isBlocked": False, "questionsInWindow": 0},
        {"id": "s2", "name": "Grace Hopper", "totalQuestions": 1, "isBlocked": False, "questionsInWindow": 1},
    ]


def test_summary_empty(client):
    assert client.get("/api/students/summary").json() == []


def test_reset_student(client):
    for _ in range(4):
        client.post("/api/questions", json=_payload())

    response = client.post("/api/students/s1/reset")

    assert response.status_code == 200
    assert response.json()["success"] is True
    stats = client.get("/api/students/s1/stats").json()
    assert stats["isBlocked"] is False
    assert stats["blockedUntil"] is None
    assert stats["questionHistory"] == []
    assert stats["totalQuestions"] == 3
    assert client.post("/api/questions", json=_payload()).status_code == 200


def test_reset_student_not_found(client):
    response = client.post("/api/students/ghost/reset")

    assert response.status_code == 404


def test_cors_headers(client):
    response = client.options(
        "/api/questions",
        headers={
            "Origin": "http://frontend.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://frontend.example")
