"""Core module initialization."""

from .auth import check_bearer_token
from .cors import cors_headers, preflight_response
from .exceptions import (
    AuthenticationError,
    InvalidModelError,
    MalformedBodyError,
    MethodNotAllowedError,
    ProxyError,
    RouteNotFoundError,
    UpstreamError,
)
from .models import ALLOWED_MODELS, FALLBACK_DEFAULT_MODEL, build_model_list
from .policy import ModelPolicy, apply_model_policy
from .upstream import (
    DISGUISE_HEADERS,
    UPSTREAM_URL,
    build_outbound_headers,
    build_upstream_body,
    create_upstream_client,
    forward_to_upstream,
)

__all__ = [
    "ALLOWED_MODELS",
    "AuthenticationError",
    "DISGUISE_HEADERS",
    "FALLBACK_DEFAULT_MODEL",
    "InvalidModelError",
    "MalformedBodyError",
    "MethodNotAllowedError",
    "ModelPolicy",
    "ProxyError",
    "RouteNotFoundError",
    "UPSTREAM_URL",
    "UpstreamError",
    "apply_model_policy",
    "build_model_list",
    "build_outbound_headers",
    "build_upstream_body",
    "check_bearer_token",
    "cors_headers",
    "create_upstream_client",
    "forward_to_upstream",
    "preflight_response",
]
