"""
Shared fixtures: a Gemini provider backed by httpx.MockTransport and a test client.
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.llm_dependency import get_llm_provider
from app.llm.gemini_provider import GeminiProvider
from app.main import app


def gemini_envelope(text: str) -> dict:
    """A well-formed generateContent reply whose first part carries `text`."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 40},
    }


class FakeGemini:
    """Records outbound requests and replies with a configurable response."""

    def __init__(self):
        self.requests = []
        self.response = httpx.Response(200, json=gemini_envelope("[]"))
        self.error = None

    def reply_text(self, text: str):
        self.response = httpx.Response(200, json=gemini_envelope(text))

    def reply_json(self, payload):
        self.reply_text(json.dumps(payload))

    def reply_envelope(self, envelope):
        self.response = httpx.Response(200, json=envelope)

    def reply_status(self, status_code: int, body: str = ""):
        self.response = httpx.Response(status_code, text=body)

    def raise_error(self, error_factory):
        self.error = error_factory

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return self.response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def provider(fake_gemini):
    return GeminiProvider(
        api_key="test-key",
        model="gemini-test",
        base_url="https://gemini.test/v1beta",
        timeout=5,
        transport=httpx.MockTransport(fake_gemini.handler),
    )


@pytest.fixture
def client(provider):
    """Create test client with the Gemini provider swapped for the mock-backed one."""
    app.dependency_overrides[get_llm_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
