"""
Pytest configuration and fixtures
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import AppConfig
from core.prompt_composer import PromptComposer
from services.assessment_client import AssessmentClient
from services.openai_service import OpenAIService
from tests.helpers import ASSESSMENT_TEXT, completion


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        openai_api_key="sk-test-key",
        openai_model="gpt-4o",
        cors_origins=["http://localhost:5173"],
        log_dir="",
    )


@pytest.fixture
def unconfigured(config) -> AppConfig:
    config.openai_api_key = ""
    return config


@pytest.fixture
def composer(config) -> PromptComposer:
    return PromptComposer.from_directory(config.get_prompts_dir())


@pytest.fixture
def openai_client():
    """Stand-in for AsyncOpenAI; only chat.completions.create is used"""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion(ASSESSMENT_TEXT))
    return client


@pytest.fixture
def assessment_client(config, composer, openai_client) -> AssessmentClient:
    return AssessmentClient(OpenAIService(config, client=openai_client), composer)
