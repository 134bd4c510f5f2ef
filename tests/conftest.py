"""Shared pytest fixtures for the prompt gateway tests."""

import json
from typing import Any, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_http_transport
from app import app
from openai_gateway import GatewaySettings


class FakeUpstream:
    """Stands in for the provider API and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (str, bytes)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Set a provider key and clear optional overrides."""
    for name in ("OPENAI_BASE_URL", "OPENAI_CHAT_MODEL", "OPENAI_IMAGE_SIZE", "OPENAI_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_KEY", "sk-test")
    return "sk-test"


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_KEY", raising=False)
    # Keep a stray .env from supplying the key.
    monkeypatch.setattr("openai_gateway.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(api_key="sk-test", base_url="https://upstream.test/v1")


@pytest.fixture
def test_client(upstream: FakeUpstream) -> Generator[TestClient, None, None]:
    """TestClient whose outbound provider calls go to ``upstream``.

    Cleanup:
        Dependency overrides are removed after the test completes
    """
    app.dependency_overrides[get_http_transport] = lambda: upstream.transport
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
