"""Tests for the exceptions module."""

import json

import pytest

from diproxy.core.exceptions import (
    AuthenticationError,
    InvalidModelError,
    MalformedBodyError,
    MethodNotAllowedError,
    ProxyError,
    RouteNotFoundError,
    UpstreamError,
)


class TestProxyError:
    """Tests for the base ProxyError exception."""

    def test_creates_error_with_message(self):
        """Test that error is created with message."""
        error = ProxyError("test error message")
        assert error.message == "test error message"
        assert str(error) == "test error message"

    def test_response_is_json_with_cors(self):
        response = ProxyError("broken").to_response()
        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "broken"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["content-type"] == "application/json"


@pytest.mark.parametrize(
    ("error", "status", "body"),
    [
        (AuthenticationError(), 401, {"error": "Unauthorized"}),
        (InvalidModelError(), 400, {"error": "Invalid or unsupported model specified."}),
        (MalformedBodyError("bad body"), 500, {"error": "bad body"}),
        (UpstreamError("Expecting value"), 500, {"error": "Expecting value"}),
    ],
)
def test_json_errors(error, status, body):
    response = error.to_response()
    assert response.status_code == status
    assert json.loads(response.body) == body
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize(
    ("error", "status", "text"),
    [
        (RouteNotFoundError(), 404, b"Not Found"),
        (MethodNotAllowedError(), 405, b"Method not allowed"),
    ],
)
def test_plain_text_errors(error, status, text):
    response = error.to_response()
    assert response.status_code == status
    assert response.body == text
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["access-control-allow-origin"] == "*"
