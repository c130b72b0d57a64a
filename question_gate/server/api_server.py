"""FastAPI server that exposes the student and dashboard endpoints."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field
import uvicorn

from question_gate.constants.about import APP_NAME, APP_VERSION
from question_gate.constants.network_constants import API_PREFIX, DEFAULT_HOST, DEFAULT_PORT
from question_gate.core.rate_limiter import StudentNotFoundError, StudentRateLimiter

_STUDENT_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>QuestionGate</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      label { display: block; margin-top: 0.75rem; color: #94a3b8; font-size: 0.95rem; }
      input, textarea { width: 100%; box-sizing: border-box; margin-top: 0.25rem; padding: 0.6rem; border-radius: 0.5rem; border: 1px solid #1e293b; background: #0b1120; color: #f5f7ff; font-size: 1rem; }
      textarea { min-height: 6rem; resize: vertical; }
      .primary-button { margin-top: 1rem; border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .primary-button:disabled { opacity: 0.6; cursor: not-allowed; }
      #status { min-height: 1.25rem; margin-top: 1rem; }
      .level-NORMAL { color: #4ade80; }
      .level-WARNING { color: #facc15; }
      .level-BLOCKED, .level-RATE_LIMITED { color: #f87171; }
      #limits { color: #94a3b8; font-size: 0.95rem; }
    </style>
  </head>
  <body>
    <section class=\"card\">
      <h1>Ask a Question</h1>
      <p id=\"limits\"></p>
      <form id=\"question-form\">
        <label>Student ID<input id=\"student-id\" required /></label>
        <label>Name<input id=\"student-name\" /></label>
        <label>Email<input id=\"student-email\" type=\"email\" /></label>
        <label>Question<textarea id=\"question\" required></textarea></label>
        <button id=\"submit-button\" class=\"primary-button\" type=\"submit\">Send Question</button>
      </form>
      <p id=\"status\"></p>
    </section>
    <script>
      const form = document.getElementById('question-form');
      const statusEl = document.getElementById('status');
      const submitButton = document.getElementById('submit-button');
      const limitsEl = document.getElementById('limits');

      for (const key of ['student-id', 'student-name', 'student-email']) {
        const stored = localStorage.getItem('questiongate-' + key);
        if (stored) document.getElementById(key).value = stored;
      }

      fetch('/api/config').then((r) => r.json()).then((config) => {
        limitsEl.textContent = `You can ask ${config.maxQuestions} question(s) every ${config.timeWindowMinutes} minutes.`;
      });

      form.addEventListener('submit', async (event) => {
        event.preventDefault();
        const payload = {
          studentId: document.getElementById('student-id').value.trim(),
          studentName: document.getElementById('student-name').value.trim(),
          studentEmail: document.getElementById('student-email').value.trim(),
          question: document.getElementById('question').value,
        };
        for (const key of ['student-id', 'student-name', 'student-email']) {
          localStorage.setItem('questiongate-' + key, document.getElementById(key).value.trim());
        }
        submitButton.disabled = true;
        try {
          const response = await fetch('/api/questions', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(payload),
          });
          const result = await response.json();
          if (response.status === 422) {
            statusEl.className = 'level-BLOCKED';
            statusEl.textContent = 'Please fill in your student ID and a question.';
            return;
          }
          statusEl.className = 'level-' + (result.alertLevel || 'NORMAL');
          let text = result.message;
          if (result.allowed && result.remainingQuestions !== undefined) {
            text += ` ${result.remainingQuestions} question(s) left in this window.`;
            document.getElementById('question').value = '';
          }
          if (result.cooldownUntil !== undefined) {
            text += ` You can ask again at ${new Date(result.cooldownUntil * 1000).toLocaleTimeString()}.`;
          }
          statusEl.textContent = text;
        } catch (err) {
          statusEl.className = 'level-BLOCKED';
          statusEl.textContent = 'Could not reach the server. Try again.';
        } finally {
          submitButton.disabled = false;
        }
      });
    </script>
  </body>
</html>
"""


class QuestionPayload(BaseModel):
    """Payload schema for submitted questions."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(alias="studentId", min_length=1)
    student_name: str = Field(default="", alias="studentName")
    student_email: str = Field(default="", alias="studentEmail")
    question: str = Field(min_length=1)


def _get_rate_limiter_dependency(rate_limiter: StudentRateLimiter):
    def dependency() -> StudentRateLimiter:
        return rate_limiter

    return dependency


def create_api_app(rate_limiter: StudentRateLimiter) -> FastAPI:
    """Create a FastAPI application wired to the provided rate limiter."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    limiter_dep = _get_rate_limiter_dependency(rate_limiter)

    @app.get("/", response_class=HTMLResponse)
    def serve_student_page() -> str:
        return _STUDENT_PAGE_HTML

    @app.get(f"{API_PREFIX}/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(f"{API_PREFIX}/config")
    def get_config(limiter: StudentRateLimiter = Depends(limiter_dep)) -> dict[str, object]:
        return limiter.get_config().to_dict()

    @app.post(f"{API_PREFIX}/questions")
    def submit_question(
        payload: QuestionPayload,
        limiter: StudentRateLimiter = Depends(limiter_dep),
    ) -> dict[str, object]:
        result = limiter.submit(
            payload.student_id,
            payload.student_name,
            payload.student_email,
            payload.question,
        )
        return result.to_dict()

    @app.get(f"{API_PREFIX}/students/summary")
    def get_summary(limiter: StudentRateLimiter = Depends(limiter_dep)) -> list[dict[str, object]]:
        return [summary.to_dict() for summary in limiter.get_summary()]

    @app.get(f"{API_PREFIX}/students/{{student_id}}/stats")
    def get_student_stats(
        student_id: str,
        limiter: StudentRateLimiter = Depends(limiter_dep),
    ) -> dict[str, object]:
        try:
            student = limiter.get_stats(student_id)
        except StudentNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return student.to_dict()

    @app.post(f"{API_PREFIX}/students/{{student_id}}/reset")
    def reset_student(
        student_id: str,
        limiter: StudentRateLimiter = Depends(limiter_dep),
    ) -> dict[str, object]:
        try:
            limiter.reset(student_id)
        except StudentNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"success": True, "message": f"Student {student_id} has been reset."}

    return app


def start_api_server(
    rate_limiter: StudentRateLimiter,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(rate_limiter)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuestionApiServer", daemon=True)
    thread.start()
    return thread
