"""
Liveness endpoints
"""
import logging
import platform

from aiohttp import web

from handlers.common import CONFIG_KEY
from utils.formatters import iso_timestamp

logger = logging.getLogger(__name__)


async def health_check_handler(request: web.Request) -> web.Response:
    """GET /api/health"""
    config = request.app[CONFIG_KEY]
    return web.json_response({
        "status": "healthy",
        "timestamp": iso_timestamp(),
        "environment": {
            "pythonVersion": platform.python_version(),
            "hasApiKey": config.has_api_key,
            "model": config.openai_model,
        },
    })


async def status_handler(request: web.Request) -> web.Response:
    """GET /"""
    config = request.app[CONFIG_KEY]
    return web.json_response({
        "message": "Backend server is running!",
        "timestamp": iso_timestamp(),
        "hasApiKey": config.has_api_key,
    })


def add_health_routes(app: web.Application) -> None:
    app.router.add_get('/api/health', health_check_handler)
    app.router.add_get('/', status_handler)
