from __future__ import annotations

import json
import random

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.v1.deps import get_proxy_service, get_tutor_service
from app.main import app
from app.services.backend_client import BackendClient
from app.services.local_responder import LocalResponder
from app.services.proxy_service import ProxyService
from app.services.tutor_service import TutorService

BACKEND_URL = "http://ollama.test:11434"
MODEL = "mistral:7b-instruct"


class FakeBackend:
    """Records every request the gateway sends upstream and replies via ``handler``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json={"response": "ok"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)

    def client(self) -> BackendClient:
        return BackendClient(BACKEND_URL, timeout=5, transport=httpx.MockTransport(self))


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def responder():
    return LocalResponder(random.Random(7))


def build_client(fake_backend: FakeBackend, responder: LocalResponder, *, backend_available: bool) -> TestClient:
    backend = fake_backend.client()
    service = TutorService(backend, responder, backend_available=backend_available, model=MODEL)
    app.dependency_overrides[get_tutor_service] = lambda: service
    app.dependency_overrides[get_proxy_service] = lambda: ProxyService(backend)
    return TestClient(app)


@pytest.fixture
def live_client(fake_backend, responder):
    with build_client(fake_backend, responder, backend_available=True) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def demo_client(fake_backend, responder):
    with build_client(fake_backend, responder, backend_available=False) as client:
        yield client
    app.dependency_overrides.clear()
