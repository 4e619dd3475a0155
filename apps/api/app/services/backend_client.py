from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import settings
from app.schemas.tutor import BackendCompletionRequest, CompletionResult

logger = logging.getLogger(__name__)

GENERATE_PATH = "api/generate"
TAGS_PATH = "api/tags"


class BackendClient:
    """Thin async client for an Ollama-compatible inference server."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    @staticmethod
    def describe_error(exc: Exception) -> tuple[int | None, str]:
        """Collapse any backend failure into (status_code, message).

        The backend's own ``error`` field wins over the transport text when the
        failure carried a JSON response.
        """
        status_code = None
        message = str(exc) or exc.__class__.__name__
        if isinstance(exc, httpx.HTTPStatusError):
            response = exc.response
            status_code = response.status_code
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if isinstance(payload, dict) and payload.get("error"):
                message = str(payload["error"])
        return status_code, message

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json_body: Any = None,
    ) -> httpx.Response:
        """Send one request upstream; raises httpx.HTTPError on transport failure or non-2xx."""
        kwargs: dict[str, Any] = {"params": params or None}
        if json_body is not None:
            kwargs["json"] = json_body
        async with self._client() as client:
            response = await client.request(method.upper(), self.url_for(path), **kwargs)
            response.raise_for_status()
        return response

    async def complete(self, request: BackendCompletionRequest) -> CompletionResult:
        url = self.url_for(GENERATE_PATH)
        logger.info("Sending completion request to %s (model=%s)", url, request.model)
        logger.debug("Prompt: %s...", request.prompt[:100])
        try:
            response = await self.request("POST", GENERATE_PATH, json_body=request.to_payload())
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            status_code, message = self.describe_error(exc)
            logger.warning("Completion request to %s failed: %s", url, message)
            return CompletionResult.failure(message, status_code=status_code)

        text = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(payload, dict) or not isinstance(text, (str, type(None))):
            logger.warning("Completion from %s had an unexpected shape: %r", url, payload)
            return CompletionResult.failure("Malformed response from backend")
        logger.info("Received completion from backend")
        return CompletionResult.success(text or "", data=payload)

    async def list_models(self) -> CompletionResult:
        url = self.url_for(TAGS_PATH)
        try:
            response = await self.request("GET", TAGS_PATH)
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            status_code, message = self.describe_error(exc)
            logger.warning("Model listing from %s failed: %s", url, message)
            return CompletionResult.failure(message, status_code=status_code)
        if not isinstance(payload, (dict, list)):
            logger.warning("Model listing from %s had an unexpected shape: %r", url, payload)
            return CompletionResult.failure("Malformed response from backend")
        return CompletionResult.success("", data=payload)


backend_client = BackendClient(settings.backend_url, timeout=settings.backend_timeout_seconds)
