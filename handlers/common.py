"""
Shared pieces of the HTTP handlers
"""
from typing import Any, Dict, Optional

from aiohttp import web

from config.settings import AppConfig
from models.errors import InvalidSubmissionError
from services.assessment_client import AssessmentClient
from utils.formatters import iso_timestamp

CONFIG_KEY = web.AppKey("config", AppConfig)
CLIENT_KEY = web.AppKey("assessment_client", AssessmentClient)


def error_response(status: int, error: str, details: Optional[str] = None) -> web.Response:
    """{success: false, error, details?, timestamp} with the given status"""
    body: Dict[str, Any] = {"success": False, "error": error}
    if details:
        body["details"] = details
    body["timestamp"] = iso_timestamp()
    return web.json_response(body, status=status)


async def read_json(request: web.Request) -> Any:
    """Parsed JSON body"""
    try:
        return await request.json()
    except ValueError as e:
        raise InvalidSubmissionError(f"Request body is not valid JSON: {e}") from e
