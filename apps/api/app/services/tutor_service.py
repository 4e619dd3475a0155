from __future__ import annotations

import logging
from collections.abc import Callable

from app.core.config import settings
from app.core.errors import MissingFieldError
from app.schemas.tutor import (
    DEFAULT_DAYS_UNTIL_EXAM,
    DEFAULT_SUBJECT,
    BackendCompletionRequest,
    CheckAnswerRequest,
    ChatRequest,
    GeneratePlanRequest,
    SolveRequest,
)
from app.services import prompt_builder
from app.services.backend_client import BackendClient, backend_client
from app.services.local_responder import LocalResponder, local_responder
from app.utils import tutor_texts as texts

logger = logging.getLogger(__name__)


def _require_text(value: str | None, field: str, message: str) -> str:
    if value is None or not value.strip():
        raise MissingFieldError(field, message)
    return value


class TutorService:
    """Routes tutoring requests to the backend or to the local responder.

    ``backend_available`` is fixed at construction; a service built with
    ``False`` never touches the network.
    """

    def __init__(
        self,
        backend: BackendClient,
        responder: LocalResponder,
        *,
        backend_available: bool,
        model: str,
    ) -> None:
        self.backend = backend
        self.responder = responder
        self.backend_available = backend_available
        self.model = model

    async def _generate(
        self,
        prompt: str,
        *,
        temperature: float,
        max_tokens: int,
        placeholder: str,
        fallback: Callable[[], str],
    ) -> tuple[str, str | None]:
        """Return (text, error). ``error`` is set only when the backend call failed."""
        if not self.backend_available:
            return fallback(), None

        request = BackendCompletionRequest(
            model=self.model,
            prompt=prompt,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        result = await self.backend.complete(request)
        if not result.ok:
            message = result.message or "Unknown backend error"
            return texts.FAILURE_NOTICE.format(message=message) + fallback(), message
        if not result.text:
            logger.info("Backend returned an empty completion")
            return placeholder, None
        return result.text, None

    def status(self) -> dict:
        if not self.backend_available:
            return {"status": texts.STATUS_DEMO}
        return {"status": texts.STATUS_CONNECTED.format(url=self.backend.base_url)}

    async def solve(self, payload: SolveRequest) -> dict:
        question = _require_text(payload.question, "question", "Missing question")
        subject = payload.subject or DEFAULT_SUBJECT
        logger.info('Processing question: "%s" (subject: %s)', question[:100], subject)

        solution, error = await self._generate(
            prompt_builder.build_solve_prompt(question, subject),
            temperature=0.1,
            max_tokens=2048,
            placeholder=texts.SOLVE_PLACEHOLDER,
            fallback=lambda: self.responder.solve(question, subject),
        )
        envelope = {"solution": solution, "question": question, "subject": subject}
        if error:
            envelope["error"] = error
        return envelope

    async def check_answer(self, payload: CheckAnswerRequest) -> dict:
        student_answer = _require_text(payload.student_answer, "studentAnswer", "Missing answer")

        feedback, error = await self._generate(
            prompt_builder.build_check_answer_prompt(student_answer),
            temperature=0.1,
            max_tokens=1024,
            placeholder=texts.FEEDBACK_PLACEHOLDER,
            fallback=lambda: self.responder.feedback(student_answer),
        )
        envelope = {"feedback": feedback, "studentAnswer": student_answer}
        if error:
            envelope["error"] = error
        return envelope

    async def generate_plan(self, payload: GeneratePlanRequest) -> dict:
        subject = payload.subject or DEFAULT_SUBJECT
        days = payload.days_until_exam
        if days is None or days <= 0:
            days = DEFAULT_DAYS_UNTIL_EXAM

        plan, error = await self._generate(
            prompt_builder.build_plan_prompt(subject, days),
            temperature=0.1,
            max_tokens=1024,
            placeholder=texts.PLAN_PLACEHOLDER,
            fallback=lambda: self.responder.plan(subject),
        )
        envelope = {"plan": plan, "subject": subject, "daysUntilExam": days}
        if error:
            envelope["error"] = error
        return envelope

    async def chat(self, payload: ChatRequest) -> dict:
        message = _require_text(payload.message, "message", "Missing message")

        response, error = await self._generate(
            prompt_builder.build_chat_prompt(message),
            temperature=0.7,
            max_tokens=1024,
            placeholder=texts.CHAT_PLACEHOLDER,
            fallback=lambda: self.responder.chat(message),
        )
        envelope = {"response": response, "success": error is None}
        if error:
            envelope["error"] = error
        return envelope

    async def probe_backend(self) -> tuple[int, dict]:
        """Check connectivity by listing the backend's models. Returns (status_code, body)."""
        base = {"ollama_server": self.backend.base_url}
        if not self.backend_available:
            return 503, {
                "status": "error",
                "message": "Ollama server is not configured",
                "error": "demo mode",
                **base,
            }

        logger.info("Testing connection to Ollama at %s", self.backend.base_url)
        result = await self.backend.list_models()
        if not result.ok:
            return 500, {
                "status": "error",
                "message": "Failed to connect to Ollama server",
                "error": result.message,
                **base,
            }
        return 200, {"status": "success", "models": result.data, **base}


tutor_service = TutorService(
    backend_client,
    local_responder,
    backend_available=settings.backend_available,
    model=settings.ollama_model,
)
