"""
POST /api/questionnaire/assess
"""
import logging

from aiohttp import web

from core.assessment_builder import build_request
from handlers.common import CLIENT_KEY, error_response, read_json
from models.errors import ConfigurationError, InvalidSubmissionError, MissingIndicatorError

logger = logging.getLogger(__name__)


async def assess_questionnaire(request: web.Request) -> web.Response:
    client = request.app[CLIENT_KEY]

    try:
        client.ensure_configured()
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return error_response(500, str(e))

    try:
        payload = await read_json(request)
        assessment_request = build_request(payload)
    except MissingIndicatorError as e:
        logger.warning(f"⚠️ Incomplete checklist: {e}")
        return error_response(400, "Assessment checklist is incomplete", str(e))
    except InvalidSubmissionError as e:
        logger.warning(f"⚠️ Invalid questionnaire: {e}")
        return error_response(400, "Invalid questionnaire submission", str(e))

    response = await client.submit(assessment_request)
    status = 200 if response.success else 500
    return web.json_response(response.to_dict(), status=status)
