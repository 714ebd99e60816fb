"""
Assessment client: composes the analysis request and sends it to the LLM
"""
from __future__ import annotations

import logging

from core.prompt_composer import PromptComposer
from models.assessment import AssessmentRequest, AssessmentResponse, AssessmentSubmission
from models.errors import ConfigurationError, ServiceError
from services.openai_service import OpenAIService

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "OpenAI API key not found in environment variables"
FAILURE_MESSAGE = "Failed to process business assessment"


class AssessmentClient:
    """
    Single-attempt submission of assessment requests.

    Holds no per-request state; every call to `submit` gets its own
    AssessmentSubmission.
    """

    def __init__(self, llm: OpenAIService, composer: PromptComposer):
        self.llm = llm
        self.composer = composer

    @property
    def has_credential(self) -> bool:
        return self.llm.is_available

    def ensure_configured(self) -> None:
        if not self.has_credential:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

    async def submit(self, request: AssessmentRequest) -> AssessmentResponse:
        """
        Raises:
            ConfigurationError: no credential; nothing is sent

        Upstream failures do not raise, they come back as a response with
        success=False.
        """
        self.ensure_configured()

        prompt = self.composer.compose_request(request)
        submission = AssessmentSubmission(request=request)

        logger.info(
            f"📨 Processing business questionnaire assessment "
            f"({request.basic_info.business_type}, "
            f"{request.checklist.count(True)} green / {request.checklist.count(False)} red, "
            f"{len(prompt)} characters)"
        )
        submission.dispatch()
        try:
            text = await self.llm.generate(prompt)
        except ServiceError as e:
            logger.error(f"❌ Assessment failed: {e}")
            return submission.fail(FAILURE_MESSAGE, details=str(e))

        response = submission.succeed(text)
        logger.info(f"✅ Received assessment in {submission.duration:.2f}s")
        return response

    async def send_prompt(self, prompt: str) -> str:
        """Raw prompt passthrough; raises ConfigurationError or ServiceError"""
        self.ensure_configured()
        return await self.llm.generate(prompt)

