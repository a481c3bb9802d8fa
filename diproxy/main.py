"""Main FastAPI application for the DeepInfra proxy."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import Response

from .api import ProxyHandler
from .config import ProxySettings, load_settings
from .core import create_upstream_client

logger = logging.getLogger("diproxy")


def _log_startup(settings: ProxySettings) -> None:
    logger.info("diproxy starting up...")
    logger.info("Upstream endpoint: %s", settings.upstream_url)
    logger.info("Model policy: %s", settings.model_policy.value)
    if settings.models_route_enabled:
        logger.info("Allowlist contains %d models", len(settings.allowed_models))
    else:
        logger.info("Default model: %s", settings.default_model)
    if settings.auth_enabled:
        logger.info("Bearer token authentication enabled")
    else:
        logger.warning("TOKEN is not set; proxy is open to any caller")


def create_app(
    settings: Optional[ProxySettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the proxy application.

    Args:
        settings: Resolved settings. Loaded from config and environment when
            omitted.
        client: Upstream HTTP client. When omitted one is created at startup
            and closed at shutdown; a supplied client is left open.

    Returns:
        The configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_startup(settings)
        owned_client: Optional[httpx.AsyncClient] = None
        if getattr(app.state, "handler", None) is None:
            owned_client = create_upstream_client(settings)
            app.state.upstream_client = owned_client
            app.state.handler = ProxyHandler(settings, owned_client)
        logger.info("diproxy ready to handle requests")
        try:
            yield
        finally:
            if owned_client is not None:
                await owned_client.aclose()
                app.state.handler = None
            logger.info("diproxy shut down")

    # Docs routes would shadow the catch-all route below.
    app = FastAPI(
        title="diproxy",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.handler = None
    if client is not None:
        app.state.upstream_client = client
        app.state.handler = ProxyHandler(settings, client)

    async def proxy_entrypoint(request: Request) -> Response:
        handler: ProxyHandler = request.app.state.handler
        return await handler.handle(request)

    # No method filter: every verb reaches the handler so it alone decides
    # between 404 and 405.
    app.add_route("/{path:path}", proxy_entrypoint, methods=None, include_in_schema=False)

    return app


__all__ = ["create_app"]
