"""Core exceptions for the proxy.

Each exception knows the HTTP response it maps to, so the handler can turn
any failure into a reply at a single place.
"""

from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .cors import cors_headers


class ProxyError(Exception):
    """Base exception for proxy errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Response:
        return JSONResponse(
            {"error": self.message},
            status_code=self.status_code,
            headers=cors_headers(),
        )


class RouteNotFoundError(ProxyError):
    """Raised when no route matches the request path."""

    status_code = 404

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)

    def to_response(self) -> Response:
        return PlainTextResponse(self.message, status_code=self.status_code, headers=cors_headers())


class MethodNotAllowedError(ProxyError):
    """Raised when a known path is called with an unsupported method."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed") -> None:
        super().__init__(message)

    def to_response(self) -> Response:
        return PlainTextResponse(self.message, status_code=self.status_code, headers=cors_headers())


class AuthenticationError(ProxyError):
    """Raised when the bearer token is missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class InvalidModelError(ProxyError):
    """Raised when the requested model is missing or not allowlisted."""

    status_code = 400

    def __init__(self, message: str = "Invalid or unsupported model specified.") -> None:
        super().__init__(message)


class MalformedBodyError(ProxyError):
    """Raised when the request body parses but cannot be used as a payload."""

    status_code = 500


class UpstreamError(ProxyError):
    """Wraps any failure while parsing, forwarding or serializing."""

    status_code = 500
