"""
Logging configuration module.
Configures logging from the application settings.
"""

import logging
import sys
from typing import Optional

from tour_ratings.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure the root logger.

    Args:
        level: Level name such as "INFO" or "DEBUG" (defaults to LOG_LEVEL)
        log_file: Optional file path for log output (defaults to LOG_FILE);
            logs go to stderr when unset
    """
    level_name = (level or settings.log_level).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    log_file = log_file or settings.log_file

    if log_file:
        handler = logging.FileHandler(log_file, mode="a")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    # force: the API and the CLI may both configure logging in one process
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured at level {level_name}")
