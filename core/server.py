#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTTP server of the assessment service
"""

import logging
from typing import Optional

from aiohttp import web

from config.settings import AppConfig
from core.middleware import cors_middleware, error_middleware
from core.prompt_composer import PromptComposer
from handlers.common import CLIENT_KEY, CONFIG_KEY
from handlers.prompt import probe_prompt
from handlers.questionnaire import assess_questionnaire
from services.assessment_client import AssessmentClient
from services.health_check import add_health_routes
from services.openai_service import OpenAIService

logger = logging.getLogger(__name__)


class AssessmentServer:
    """Wires configuration, services and routes into an aiohttp application"""

    def __init__(self, config: AppConfig, client: Optional[AssessmentClient] = None):
        """
        Args:
            config: service configuration
            client: prebuilt assessment client; built from config when omitted
        """
        self.config = config
        if client is None:
            composer = PromptComposer.from_directory(
                config.get_prompts_dir(),
                language=config.response_language,
            )
            client = AssessmentClient(OpenAIService(config), composer)
        self.client = client

        logger.info(f"🤖 Server initialized. LLM: {'enabled' if client.has_credential else 'disabled (no API key)'}")

    def build_app(self) -> web.Application:
        app = web.Application(middlewares=[
            cors_middleware(self.config.cors_origins),
            error_middleware,
        ])
        app[CONFIG_KEY] = self.config
        app[CLIENT_KEY] = self.client
        self._setup_routes(app)
        return app

    def _setup_routes(self, app: web.Application) -> None:
        add_health_routes(app)
        app.router.add_post('/api/questionnaire/assess', assess_questionnaire)
        app.router.add_post('/api/llm/test', probe_prompt)

    def run(self) -> None:
        """Blocking run until interrupted"""
        app = self.build_app()
        logger.info(f"🚀 Server running on http://{self.config.host}:{self.config.port}")
        logger.info(f"📡 CORS enabled for {', '.join(self.config.cors_origins) or 'no origins'}")
        logger.info(f"🔑 OpenAI API key: {'Found' if self.config.has_api_key else 'Missing'}")
        web.run_app(app, host=self.config.host, port=self.config.port, print=None)
