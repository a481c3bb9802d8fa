"""Models listing endpoint - OpenAI compatible."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from ...core.cors import cors_headers
from ...core.models import build_model_list

if TYPE_CHECKING:
    from ...config import ProxySettings

logger = logging.getLogger("diproxy")


async def list_models(settings: "ProxySettings") -> JSONResponse:
    """List the allowlisted models in OpenAI API format.

    GET /v1/models
    """
    logger.info("Received models list request")
    return JSONResponse(build_model_list(settings.allowed_models), headers=cors_headers())
