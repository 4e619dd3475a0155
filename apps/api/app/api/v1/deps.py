from __future__ import annotations

from app.services.proxy_service import ProxyService, proxy_service
from app.services.tutor_service import TutorService, tutor_service


def get_tutor_service() -> TutorService:
    return tutor_service


def get_proxy_service() -> ProxyService:
    return proxy_service
