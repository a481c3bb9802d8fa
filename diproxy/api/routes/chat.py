"""OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import Request, Response

from ...core.auth import check_bearer_token
from ...core.exceptions import MalformedBodyError
from ...core.policy import apply_model_policy
from ...core.upstream import forward_to_upstream

if TYPE_CHECKING:
    from ...config import ProxySettings

logger = logging.getLogger("diproxy")

CHAT_COMPLETIONS_PATHS = frozenset({"/v1/chat/completions", "/v1/openai/chat/completions"})


def _reject_constant(name: str):
    # NaN and Infinity are not JSON and could not be sent upstream.
    raise MalformedBodyError(f"Unexpected token '{name}' in JSON body")


def parse_body(body: bytes):
    """Parse a request body as strict JSON."""
    return json.loads(body, parse_constant=_reject_constant)


async def chat_completions(
    request: Request,
    settings: "ProxySettings",
    client: httpx.AsyncClient,
) -> Response:
    """Chat completions endpoint.

    POST /v1/chat/completions
    POST /v1/openai/chat/completions

    The token is checked before the body is read, so an unauthorized caller
    gets 401 whatever it sent. Parse and upstream failures propagate to the
    handler.
    """
    check_bearer_token(request.headers, settings)

    body = await request.body()
    payload = parse_body(body)
    payload = apply_model_policy(payload, settings)

    model = payload.get("model") if isinstance(payload, dict) else None
    stream = bool(payload.get("stream")) if isinstance(payload, dict) else False
    logger.info("Forwarding chat completion for model %s, stream=%s", model, stream)
    return await forward_to_upstream(client, settings, payload)
