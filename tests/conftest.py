"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from diproxy.config import ProxySettings
from diproxy.main import create_app
from diproxy.testing import FakeUpstream

UPSTREAM_URL = "http://upstream.local/v1/openai/chat/completions"


# =============================================================================
# Settings Builders
# =============================================================================


def build_settings(**overrides: Any) -> ProxySettings:
    """Build settings pointing at the in-process fake upstream.

    Args:
        **overrides: Any ``ProxySettings`` field to replace.

    Returns:
        Immutable settings for ``create_app``.
    """
    settings = ProxySettings(upstream_url=UPSTREAM_URL)
    return dataclasses.replace(settings, **overrides)


# =============================================================================
# Fake Upstream Fixtures
# =============================================================================


@pytest.fixture
def upstream() -> FakeUpstream:
    """A fresh fake upstream with an empty response queue."""
    return FakeUpstream()


@pytest.fixture
def make_client(
    upstream: FakeUpstream,
) -> Generator[Callable[..., TestClient], None, None]:
    """Factory for proxy test clients wired to the fake upstream.

    Usage:
        def test_chat(upstream, make_client):
            upstream.enqueue_openai_chat_response("Hello")
            client = make_client(token="abc")
            response = client.post("/v1/chat/completions", json={...})
    """
    clients: list[TestClient] = []

    def factory(**overrides: Any) -> TestClient:
        upstream_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=upstream.app))
        app = create_app(build_settings(**overrides), client=upstream_client)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    try:
        yield factory
    finally:
        for client in clients:
            client.__exit__(None, None, None)


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    """Proxy client with default settings: allowlist policy, no token."""
    return make_client()
