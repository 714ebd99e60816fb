"""
aiohttp middlewares: JSON errors and CORS
"""
import logging
from typing import Iterable

from aiohttp import web

from handlers.common import error_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


@web.middleware
async def error_middleware(request: web.Request, handler):
    """Unhandled exceptions become a JSON 500 instead of a bare error page"""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception(f"💥 Unhandled error on {request.method} {request.path}")
        return error_response(500, "Internal server error", str(e))


def cors_middleware(allowed_origins: Iterable[str]):
    origins = frozenset(allowed_origins)

    def apply_headers(request: web.Request, response: web.StreamResponse) -> None:
        origin = request.headers.get("Origin")
        if origin and origin in origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Vary"] = "Origin"

    @web.middleware
    async def middleware(request: web.Request, handler):
        if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
            response = web.Response(status=204)
            response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
            response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
        else:
            try:
                response = await handler(request)
            except web.HTTPException as e:
                apply_headers(request, e)
                raise
        apply_headers(request, response)
        return response

    return middleware
