from __future__ import annotations

import logging

import httpx
from fastapi.responses import JSONResponse, Response

from app.schemas.proxy import ProxyRequest
from app.services.backend_client import BackendClient, backend_client

logger = logging.getLogger(__name__)


class ProxyService:
    def __init__(self, backend: BackendClient) -> None:
        self.backend = backend

    async def forward(self, proxy_request: ProxyRequest) -> Response:
        url = self.backend.url_for(proxy_request.target_path)
        logger.info("Proxying %s request to: %s", proxy_request.method, url)
        try:
            upstream = await self.backend.request(
                proxy_request.method,
                proxy_request.target_path,
                params=proxy_request.query,
                json_body=proxy_request.forwarded_body,
            )
        except httpx.HTTPError as exc:
            _, message = self.backend.describe_error(exc)
            details = str(exc) or exc.__class__.__name__
            logger.error("Proxy request to %s failed: %s", url, details)
            return JSONResponse(status_code=500, content={"error": message, "details": details})

        content_type = upstream.headers.get("content-type")
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=content_type,
        )


proxy_service = ProxyService(backend_client)
