"""Outbound request construction and response relay for the upstream API."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Mapping

import httpx
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from .cors import cors_headers

if TYPE_CHECKING:
    from ..config import ProxySettings

logger = logging.getLogger("diproxy.upstream")

UPSTREAM_URL = "https://api.deepinfra.com/v1/openai/chat/completions"
DEFAULT_CONTENT_TYPE = "application/json"

# Headers the upstream's web UI sends. The upstream may reject requests that
# lack any of them, so they always replace whatever the client sent.
DISGUISE_HEADERS: Mapping[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36 Edg/133.0.0.0"
    ),
    "Accept": "text/event-stream",
    "Accept-Encoding": "gzip, deflate, br, zstd",
    "Content-Type": "application/json",
    "sec-ch-ua-platform": "Windows",
    "X-Deepinfra-Source": "web-page",
    "sec-ch-ua": '"Not(A:Brand";v="99", "Microsoft Edge";v="133", "Chromium";v="133"',
    "sec-ch-ua-mobile": "?0",
    "Origin": "https://deepinfra.com",
    "Sec-Fetch-Site": "same-site",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Dest": "empty",
    "Referer": "https://deepinfra.com/",
}


def build_outbound_headers() -> dict[str, str]:
    """Return the headers for an upstream call.

    Inbound headers are never forwarded; the disguise table is the whole set.
    """
    return dict(DISGUISE_HEADERS)


def build_upstream_body(payload: Any) -> bytes:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def create_upstream_client(settings: "ProxySettings") -> httpx.AsyncClient:
    """Create the shared client used for all upstream calls."""
    if settings.timeout_seconds is None:
        timeout = httpx.Timeout(None)
    else:
        timeout = httpx.Timeout(settings.timeout_seconds)
    return httpx.AsyncClient(timeout=timeout, follow_redirects=False)


async def forward_to_upstream(
    client: httpx.AsyncClient,
    settings: "ProxySettings",
    payload: Any,
) -> StreamingResponse:
    """POST ``payload`` upstream and relay the response body as it arrives.

    Only status code, ``Content-Type`` and the CORS header reach the client;
    all other upstream headers are dropped. Errors while building or sending
    the request propagate to the caller.
    """
    body = build_upstream_body(payload)
    headers = build_outbound_headers()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Outbound headers: %s", headers)
        logger.debug("Sending %d bytes to %s", len(body), settings.upstream_url)

    request = client.build_request("POST", settings.upstream_url, headers=headers, content=body)
    upstream_response = await client.send(request, stream=True)
    logger.info(
        "Upstream responded with status %s (%s)",
        upstream_response.status_code,
        upstream_response.headers.get("content-type", "no content-type"),
    )

    async def _iter_response():
        chunk_count = 0
        total_bytes = 0
        try:
            # aiter_bytes undoes Content-Encoding, which is not relayed.
            async for chunk in upstream_response.aiter_bytes():
                chunk_count += 1
                total_bytes += len(chunk)
                yield chunk
        finally:
            await upstream_response.aclose()
            logger.debug("Relayed %d chunks, %d bytes", chunk_count, total_bytes)

    response_headers = cors_headers()
    response_headers["Content-Type"] = (
        upstream_response.headers.get("content-type") or DEFAULT_CONTENT_TYPE
    )
    return StreamingResponse(
        _iter_response(),
        status_code=upstream_response.status_code,
        headers=response_headers,
        background=BackgroundTask(upstream_response.aclose),
    )
