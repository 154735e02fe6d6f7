"""Shared pytest fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

from config import ProviderConfig

GEMINI_URL = "https://gemini.test/v1beta/models/test:generateContent"


def gemini_body(text: str) -> str:
    """A minimal successful generateContent response carrying text."""
    return json.dumps(
        {
            "candidates": [
                {
                    "content": {"parts": [{"text": text}], "role": "model"},
                    "finishReason": "STOP",
                }
            ]
        }
    )


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(api_url=GEMINI_URL, api_key="test-key", timeout=5.0)


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], Any]], httpx.AsyncClient]:
    """Factory: wrap a request handler in an AsyncClient with no real network."""

    def _make(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
