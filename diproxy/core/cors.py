"""CORS headers attached to every proxy response."""

from fastapi.responses import Response

PREFLIGHT_MAX_AGE = "86400"
ALLOWED_REQUEST_HEADERS = "Content-Type, Authorization"


def cors_headers() -> dict[str, str]:
    return {"Access-Control-Allow-Origin": "*"}


def allowed_methods(models_route_enabled: bool) -> str:
    if models_route_enabled:
        return "POST, GET, OPTIONS"
    return "POST, OPTIONS"


def preflight_response(models_route_enabled: bool) -> Response:
    """Answer a CORS preflight with an empty 200 response."""
    headers = cors_headers()
    headers.update(
        {
            "Access-Control-Allow-Methods": allowed_methods(models_route_enabled),
            "Access-Control-Allow-Headers": ALLOWED_REQUEST_HEADERS,
            "Access-Control-Max-Age": PREFLIGHT_MAX_AGE,
        }
    )
    return Response(status_code=200, headers=headers)
