from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request

from app.api.v1.deps import get_proxy_service
from app.schemas.proxy import ProxyRequest
from app.services.proxy_service import ProxyService

router = APIRouter(tags=["proxy"])

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def _read_json_body(request: Request):
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy(path: str, request: Request, service: ProxyService = Depends(get_proxy_service)):
    proxy_request = ProxyRequest(
        method=request.method,
        target_path=path,
        query=list(request.query_params.multi_items()),
        body=await _read_json_body(request),
    )
    return await service.forward(proxy_request)
