"""Request handler: routing, validation and forwarding in one place."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import Request, Response

from ..core.cors import preflight_response
from ..core.exceptions import MethodNotAllowedError, ProxyError, RouteNotFoundError, UpstreamError
from .routes import CHAT_COMPLETIONS_PATHS, chat_completions, list_models

if TYPE_CHECKING:
    from ..config import ProxySettings

logger = logging.getLogger("diproxy")

MODELS_PATH = "/v1/models"


class ProxyHandler:
    """Turns one inbound request into exactly one response.

    Routes are evaluated in order and the first match wins:

    1. ``GET /v1/models`` (allowlist policy only)
    2. ``OPTIONS`` on any path
    3. ``POST`` on a chat completions path
    4. unknown path: 404
    5. chat completions path with another method: 405
    """

    def __init__(self, settings: "ProxySettings", client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.client = client

    async def handle(self, request: Request) -> Response:
        method = request.method.upper()
        path = request.url.path
        try:
            response = await self._dispatch(request, method, path)
        except ProxyError as exc:
            logger.info("%s %s rejected: %s", method, path, exc.message)
            response = exc.to_response()
        except json.JSONDecodeError as exc:
            logger.warning("Invalid JSON payload on %s %s: %s", method, path, exc)
            response = UpstreamError(str(exc)).to_response()
        except httpx.HTTPError as exc:
            logger.error(
                "Upstream request failed for %s %s: %s (type: %s)",
                method,
                path,
                exc,
                exc.__class__.__name__,
            )
            response = UpstreamError(str(exc)).to_response()
        except Exception as exc:
            logger.exception("Unexpected error handling %s %s", method, path)
            response = UpstreamError(str(exc)).to_response()
        logger.info("%s %s -> %s", method, path, response.status_code)
        return response

    async def _dispatch(self, request: Request, method: str, path: str) -> Response:
        if self.settings.models_route_enabled and path == MODELS_PATH and method == "GET":
            return await list_models(self.settings)
        if method == "OPTIONS":
            return preflight_response(self.settings.models_route_enabled)
        if path not in CHAT_COMPLETIONS_PATHS:
            raise RouteNotFoundError()
        if method != "POST":
            raise MethodNotAllowedError()
        return await chat_completions(request, self.settings, self.client)
