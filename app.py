#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point of the business sale-readiness assessment service
"""

import logging

from config.settings import load_config
from core.server import AssessmentServer
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    app_logger = setup_logging(config.get_log_level(), log_dir=config.log_dir or None)
    app_logger.log_startup_info(config.to_log_dict())
    config.validate()

    AssessmentServer(config).run()


if __name__ == '__main__':
    main()
