#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Service configuration
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,"
    "https://business-assessment-frontend.onrender.com"
)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class AppConfig:
    """Service configuration, read from the environment"""

    # Credentials
    openai_api_key: str = field(default_factory=lambda: os.getenv('OPENAI_API_KEY', ''))

    # Server
    host: str = field(default_factory=lambda: os.getenv('HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.getenv('PORT', '5000')))
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv('CORS_ORIGINS', DEFAULT_CORS_ORIGINS))
    )

    # OpenAI
    openai_model: str = field(default_factory=lambda: os.getenv('OPENAI_MODEL', 'gpt-4o'))
    openai_temperature: float = field(default_factory=lambda: float(os.getenv('OPENAI_TEMPERATURE', '0.7')))
    openai_max_tokens: int = field(default_factory=lambda: int(os.getenv('OPENAI_MAX_TOKENS', '4096')))
    openai_timeout: float = field(default_factory=lambda: float(os.getenv('OPENAI_TIMEOUT', '120')))
    openai_base_url: Optional[str] = field(default_factory=lambda: os.getenv('OPENAI_BASE_URL') or None)

    # Assessment
    response_language: str = field(default_factory=lambda: os.getenv('ASSESSMENT_LANGUAGE', 'English'))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO').upper())
    log_dir: str = field(default_factory=lambda: os.getenv('LOG_DIR', 'logs'))

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    def get_prompts_dir(self) -> Path:
        return Path(__file__).parent / 'prompts'

    def get_log_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    def validate(self) -> List[str]:
        """Return configuration problems; none of them stops the server"""
        problems = []

        if not self.openai_api_key:
            problems.append("OPENAI_API_KEY is not set, assessments will be rejected")
        if not 0 < self.port < 65536:
            problems.append(f"PORT {self.port} is out of range")
        if self.openai_timeout <= 0:
            problems.append(f"OPENAI_TIMEOUT must be positive, got {self.openai_timeout}")
        if not self.get_prompts_dir().is_dir():
            problems.append(f"Prompt directory not found: {self.get_prompts_dir()}")

        for problem in problems:
            logger.warning(f"⚠️ {problem}")
        if not problems:
            logger.info("✅ Configuration passed validation")

        return problems

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            "openai_api_key": self.openai_api_key,
            "openai_model": self.openai_model,
            "openai_timeout": self.openai_timeout,
            "host": self.host,
            "port": self.port,
            "cors_origins": ", ".join(self.cors_origins),
            "response_language": self.response_language,
        }


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """Load .env (if present) into the environment and build the config"""
    load_dotenv(env_file)
    return AppConfig()
