"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from resume_builder.clients.gemini_client import GeminiClient

BASE_URL = "https://generativelanguage.googleapis.com"


def _make_envelope(text: str) -> str:
    """Build a Gemini generateContent response body around a text part."""
    return json.dumps(
        {
            "candidates": [
                {
                    "content": {"parts": [{"text": text}], "role": "model"},
                    "finishReason": "STOP",
                }
            ],
            "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 80},
        }
    )


@pytest.fixture
def sample_description() -> str:
    return "i am varun kumar with 2 years of exp of java "


@pytest.fixture
def sample_resume() -> dict:
    return {
        "personalInformation": {"fullName": "Varun Kumar"},
        "summary": "Java developer with 2 years of experience.",
        "skills": [{"title": "Java", "level": "Intermediate"}],
    }


@pytest.fixture
def make_client(monkeypatch) -> Callable[..., GeminiClient]:
    """Factory for a GeminiClient backed by an httpx.MockTransport handler."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> GeminiClient:
        http_client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        return GeminiClient(api_key="test-key", http_client=http_client, **kwargs)

    return _make


@pytest.fixture
def make_envelope() -> Callable[[str], str]:
    return _make_envelope
