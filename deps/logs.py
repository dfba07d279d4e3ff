"""Logging setup"""

import logging

from conf import settings

logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger(settings.program_name)
logger.setLevel(settings.log_level)
