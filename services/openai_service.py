"""
OpenAI transport: one prompt in, one text out
"""
import logging
import time
from typing import Optional

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    OpenAIError,
)

from config.settings import AppConfig
from models.errors import ConfigurationError, ServiceError
from utils.logger import app_logger

logger = logging.getLogger(__name__)


class OpenAIService:
    """Sends a single prompt to the chat completions API"""

    def __init__(self, config: AppConfig, client: Optional[AsyncOpenAI] = None):
        self.config = config
        self.is_available = bool(config.openai_api_key)
        self._client = client

        if self._client is None and self.is_available:
            # retries are disabled: a submission is a single attempt
            self._client = AsyncOpenAI(
                api_key=config.openai_api_key,
                base_url=config.openai_base_url,
                timeout=config.openai_timeout,
                max_retries=0,
            )
            logger.info(f"✅ OpenAI client initialized (model {config.openai_model})")
        elif not self.is_available:
            logger.warning("⚠️ OPENAI_API_KEY is not set, assessments are disabled")

    @property
    def model(self) -> str:
        return self.config.openai_model

    async def generate(self, prompt: str) -> str:
        """
        Send `prompt` as the only message and return the reply text.

        Raises:
            ConfigurationError: no API key configured
            ServiceError: the call failed or returned no text
        """
        if not self.is_available or self._client is None:
            raise ConfigurationError("OpenAI API key not found in environment variables")

        started = time.monotonic()
        try:
            response = await self._client.chat.completions.create(
                model=self.config.openai_model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.config.openai_max_tokens,
                temperature=self.config.openai_temperature,
            )
        except APITimeoutError as e:
            logger.error(f"❌ OpenAI request timed out after {self.config.openai_timeout}s")
            raise ServiceError(f"Request timed out: {e}") from e
        except APIConnectionError as e:
            logger.error(f"❌ OpenAI is unreachable: {e}")
            raise ServiceError(f"Connection error: {e}") from e
        except APIStatusError as e:
            logger.error(f"❌ OpenAI API error {e.status_code}: {e.message}")
            raise ServiceError(e.message, status=e.status_code) from e
        except OpenAIError as e:
            logger.error(f"❌ OpenAI call failed: {e}")
            raise ServiceError(str(e)) from e

        content = self._extract_text(response)
        app_logger.log_llm_event(self.model, len(content), time.monotonic() - started)
        return content

    @staticmethod
    def _extract_text(response) -> str:
        choices = getattr(response, "choices", None)
        if not choices:
            raise ServiceError("Malformed response: no choices returned")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise ServiceError("Malformed response: empty message content")
        return content
