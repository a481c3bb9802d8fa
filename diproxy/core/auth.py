"""Bearer token check for proxied requests."""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING, Mapping

from .exceptions import AuthenticationError

if TYPE_CHECKING:
    from ..config import ProxySettings

logger = logging.getLogger("diproxy")


def check_bearer_token(headers: Mapping[str, str], settings: "ProxySettings") -> None:
    """Require ``Authorization: Bearer <token>`` when a token is configured.

    Raises:
        AuthenticationError: The header is missing or does not match exactly.
    """
    if not settings.auth_enabled:
        return
    provided = headers.get("authorization") or ""
    expected = f"Bearer {settings.token}"
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Request rejected: missing or invalid bearer token")
        raise AuthenticationError()
