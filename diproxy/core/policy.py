"""Model handling policies for chat-completion payloads."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidModelError, MalformedBodyError

if TYPE_CHECKING:
    from ..config import ProxySettings

logger = logging.getLogger("diproxy")


class ModelPolicy(str, enum.Enum):
    """How the ``model`` field of a request is handled.

    ALLOWLIST rejects anything outside the allowed set and exposes
    ``GET /v1/models``. DEFAULT_MODEL fills in a missing model and forwards
    whatever the client asked for otherwise.
    """

    ALLOWLIST = "allowlist"
    DEFAULT_MODEL = "default_model"


def apply_model_policy(payload: Any, settings: "ProxySettings") -> Any:
    """Validate or complete the ``model`` field according to the active policy.

    Returns the payload to forward. The input is never mutated. A ``null``
    body has no fields to read and fails like a parse error under either
    policy. Under the default-model policy a JSON array has nowhere to carry
    a model and is forwarded as is, while other scalars fail.
    """
    if payload is None:
        raise MalformedBodyError("Cannot read 'model' from a null request body")

    if settings.model_policy is ModelPolicy.ALLOWLIST:
        model = payload.get("model") if isinstance(payload, dict) else None
        if not isinstance(model, str) or model not in settings.allowed_models:
            logger.warning("Rejected request for unsupported model: %r", model)
            raise InvalidModelError()
        return payload

    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        raise MalformedBodyError("Cannot set 'model' on a non-object request body")
    if payload.get("model"):
        return payload
    logger.info("No model in request; using default model %s", settings.default_model)
    updated = dict(payload)
    updated["model"] = settings.default_model
    return updated
