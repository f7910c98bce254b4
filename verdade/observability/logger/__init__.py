"""
centralized logging for the verdade backend.

usage:
    >>> from verdade.observability.logger import get_logger, Stage, time_profile
    >>> logger = get_logger(__name__, Stage.FEED_FETCH)
    >>> logger.warning("feed returned 503")

configuration (environment variables):
    - LOG_LEVEL: DEBUG, INFO, WARN, ERROR (default: INFO)
    - LOG_OUTPUT: STDOUT, FILE, BOTH (default: STDOUT)
    - LOG_DIR: directory for log files (default: logs)
    - LOG_SPLIT_BY_STAGE: one file per stage when true (default: false)
    - LOG_FILE_MAX_BYTES / LOG_FILE_BACKUP_COUNT: rotation settings
"""

from verdade.observability.logger.config import LoggerConfig, get_logger_config
from verdade.observability.logger.decorators import time_profile
from verdade.observability.logger.logger import (
    get_logger,
    get_request_logger,
    setup_logging,
)
from verdade.observability.logger.stage import Stage

__all__ = [
    "get_logger",
    "get_request_logger",
    "setup_logging",
    "Stage",
    "LoggerConfig",
    "get_logger_config",
    "time_profile",
]
