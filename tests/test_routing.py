"""Tests for request routing, CORS preflight and the models listing."""

from __future__ import annotations

import pytest

from diproxy.core.models import ALLOWED_MODELS
from diproxy.core.policy import ModelPolicy


@pytest.mark.parametrize(
    "path",
    [
        "/",
        "/v1",
        "/v1/completions",
        "/v1/chat/completions/",
        "/v1/openai/chat/completions/extra",
        "/v2/chat/completions",
        "/docs",
        "/openapi.json",
    ],
)
def test_unknown_paths_return_404(client, path):
    response = client.post(path, json={"model": "Qwen/Qwen3-32B"})
    assert response.status_code == 404
    assert response.text == "Not Found"
    assert response.headers["access-control-allow-origin"] == "*"


def test_unknown_path_get_returns_404(client):
    response = client.get("/v1/embeddings")
    assert response.status_code == 404


@pytest.mark.parametrize("path", ["/v1/chat/completions", "/v1/openai/chat/completions"])
@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
def test_non_post_on_chat_path_returns_405(client, path, method):
    response = client.request(method, path)
    assert response.status_code == 405
    assert response.text == "Method not allowed"


@pytest.mark.parametrize("method", ["PROPFIND", "CONNECT", "FOO"])
@pytest.mark.parametrize("path", ["/some/unknown", "/"])
def test_any_method_on_unknown_path_returns_404(client, method, path):
    response = client.request(method, path)
    assert response.status_code == 404
    assert response.text == "Not Found"
    assert response.headers["access-control-allow-origin"] == "*"
    assert "allow" not in response.headers


@pytest.mark.parametrize("method", ["PROPFIND", "FOO", "HEAD", "TRACE"])
def test_any_other_method_on_chat_path_returns_405(client, method):
    response = client.request(method, "/v1/chat/completions")
    assert response.status_code == 405
    assert response.headers["access-control-allow-origin"] == "*"
    if method != "HEAD":
        assert response.text == "Method not allowed"


def test_405_is_returned_before_auth(make_client):
    client = make_client(token="abc")
    response = client.get("/v1/chat/completions")
    assert response.status_code == 405


@pytest.mark.parametrize("path", ["/v1/chat/completions", "/anything/at/all", "/v1/models"])
def test_options_returns_preflight_for_any_path(client, path):
    response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, GET, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
    assert response.headers["access-control-max-age"] == "86400"


def test_options_does_not_require_token(make_client):
    client = make_client(token="abc")
    response = client.options("/v1/chat/completions")
    assert response.status_code == 200


def test_preflight_methods_without_models_route(make_client):
    client = make_client(model_policy=ModelPolicy.DEFAULT_MODEL)
    response = client.options("/v1/chat/completions")
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"


def test_models_endpoint_lists_allowlist(client):
    response = client.get("/v1/models")
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    payload = response.json()
    assert payload["object"] == "list"
    assert len(payload["data"]) == len(ALLOWED_MODELS)
    assert {entry["id"] for entry in payload["data"]} == set(ALLOWED_MODELS)
    for entry in payload["data"]:
        assert entry["object"] == "model"
        assert entry["owned_by"] == "deepinfra"
        assert isinstance(entry["created"], int)


def test_models_endpoint_uses_configured_allowlist(make_client):
    client = make_client(allowed_models=frozenset({"a/one", "b/two"}))
    payload = client.get("/v1/models").json()
    assert [entry["id"] for entry in payload["data"]] == ["a/one", "b/two"]


def test_models_endpoint_needs_no_token(make_client):
    client = make_client(token="abc")
    response = client.get("/v1/models")
    assert response.status_code == 200


def test_models_endpoint_absent_in_default_model_mode(make_client):
    client = make_client(model_policy=ModelPolicy.DEFAULT_MODEL)
    response = client.get("/v1/models")
    assert response.status_code == 404


def test_post_to_models_path_returns_404(client):
    response = client.post("/v1/models", json={})
    assert response.status_code == 404


def test_handler_lives_in_api_layer():
    import diproxy.core
    from diproxy.api import ProxyHandler

    assert ProxyHandler.__module__ == "diproxy.api.handler"
    assert "ProxyHandler" not in diproxy.core.__all__
