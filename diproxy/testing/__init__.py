"""Testing utilities for in-process proxy simulations."""

from .fake_upstream import (
    UPSTREAM_ROUTE,
    FakeUpstream,
    ReceivedRequest,
    UpstreamResponse,
    encode_sse_event,
)

__all__ = [
    "FakeUpstream",
    "ReceivedRequest",
    "UPSTREAM_ROUTE",
    "UpstreamResponse",
    "encode_sse_event",
]
