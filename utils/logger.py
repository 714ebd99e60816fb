#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging setup
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from utils.formatters import mask_secret

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

NOISY_LOGGERS = ('openai', 'httpx', 'httpcore', 'aiohttp.access', 'asyncio')


class AppLogger:
    """Configures the root logger once per process"""

    def __init__(self, log_dir: Optional[str] = "logs", log_level: int = logging.INFO):
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_level = log_level
        self._setup_done = False

    def setup(self, app_name: str = "salesfit_assessment"):
        if self._setup_done:
            return

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(self.log_level)
        root_logger.addHandler(console_handler)

        log_file = None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = self.log_dir / f"{app_name}_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            file_handler.setLevel(self.log_level)
            root_logger.addHandler(file_handler)

        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        self._setup_done = True

        logging.info("=" * 60)
        logging.info(f"🚀 Service started: {app_name}")
        if log_file is not None:
            logging.info(f"📁 Log file: {log_file}")
        logging.info(f"📊 Log level: {logging.getLevelName(self.log_level)}")
        logging.info("=" * 60)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def log_startup_info(self, config_info: dict):
        """Log configuration values, masking keys and tokens"""
        logger = self.get_logger(__name__)
        logger.info("📋 CONFIGURATION:")
        for key, value in config_info.items():
            if key.lower().endswith('key') or key.lower().endswith('token'):
                logger.info(f"  {key}: {mask_secret(str(value or ''))}")
            else:
                logger.info(f"  {key}: {value}")
        logger.info("=" * 60)

    def log_llm_event(self, model: str, characters: int, duration: float):
        logger = self.get_logger("llm")
        logger.info(f"🤖 {model}: {characters} characters in {duration:.2f}s")


app_logger = AppLogger()


def setup_logging(log_level: int = logging.INFO, app_name: str = "salesfit_assessment",
                  log_dir: Optional[str] = "logs") -> AppLogger:
    app_logger.log_level = log_level
    app_logger.log_dir = Path(log_dir) if log_dir else None
    app_logger.setup(app_name)
    return app_logger
