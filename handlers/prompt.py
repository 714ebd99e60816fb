"""
POST /api/llm/test: send a raw prompt, return the raw answer
"""
import logging

from aiohttp import web

from handlers.common import CLIENT_KEY, error_response, read_json
from models.errors import ConfigurationError, InvalidSubmissionError, ServiceError
from utils.formatters import iso_timestamp, truncate

logger = logging.getLogger(__name__)


async def probe_prompt(request: web.Request) -> web.Response:
    client = request.app[CLIENT_KEY]
    try:
        payload = await read_json(request)
    except InvalidSubmissionError as e:
        return error_response(400, "Invalid request", str(e))

    prompt = payload.get("prompt") if isinstance(payload, dict) else None
    if not isinstance(prompt, str) or not prompt.strip():
        return error_response(400, "Prompt is required")

    logger.info(f"🧪 Test prompt: {truncate(prompt)}")
    try:
        text = await client.send_prompt(prompt)
    except ConfigurationError as e:
        return error_response(500, str(e))
    except ServiceError as e:
        return error_response(500, "Failed to get response from the LLM service", str(e))

    return web.json_response({
        "success": True,
        "response": text,
        "timestamp": iso_timestamp(),
    })
