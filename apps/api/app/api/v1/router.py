from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.endpoints import proxy, tutor

api_router = APIRouter()
api_router.include_router(tutor.router)
# Catch-all passthrough; must stay last so domain routes win.
api_router.include_router(proxy.router)
