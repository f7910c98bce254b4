"""
logger factory for the verdade backend.

all modules obtain their logger through get_logger() so that every record
carries its stage and goes through the same handlers. output goes to stdout,
to rotating files under LOG_DIR, or both.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from verdade.observability.logger.config import LoggerConfig, get_logger_config
from verdade.observability.logger.formatter import StageLogAdapter, StageLogFormatter
from verdade.observability.logger.stage import Stage


_logging_initialized = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StageFilter(logging.Filter):
    """only lets through records tagged with one stage"""

    def __init__(self, stage: str):
        super().__init__()
        self.stage = stage

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "stage", Stage.UNKNOWN.value) == self.stage


def _rotating_handler(path: Path, config: LoggerConfig, formatter: logging.Formatter) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=config.log_file_max_bytes,
        backupCount=config.log_file_backup_count,
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> None:
    """
    initialize the root logger from the environment.

    idempotent: only the first call configures handlers. when file output is
    enabled and LOG_SPLIT_BY_STAGE is true, each stage gets its own
    <stage>.log file, otherwise everything goes to verdade.log.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    config = get_logger_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(_LEVELS.get(config.log_level, logging.INFO))
    root_logger.handlers.clear()

    formatter = StageLogFormatter(fmt=config.log_format, datefmt=config.log_date_format)

    if config.log_output in ("STDOUT", "BOTH"):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if config.log_output in ("FILE", "BOTH"):
        log_dir = Path(config.log_dir)
        if config.split_by_stage:
            for stage in Stage:
                handler = _rotating_handler(log_dir / f"{stage.value}.log", config, formatter)
                handler.addFilter(StageFilter(stage.value))
                root_logger.addHandler(handler)
        else:
            root_logger.addHandler(_rotating_handler(log_dir / "verdade.log", config, formatter))

    # httpx logs every request line at INFO, which drowns the feed fan-out
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _logging_initialized = True


def get_logger(name: str, stage: Optional[Stage] = None) -> StageLogAdapter:
    """
    get a logger tagged with a stage.

    args:
        name: logger name (typically __name__ of calling module)
        stage: stage context (default: UNKNOWN)

    returns:
        logger adapter with stage context

    example:
        >>> logger = get_logger(__name__, Stage.FEED_FETCH)
        >>> logger.info("fetching G1")
        # 2026-03-02 10:00:00 | INFO  | feed_fetch     | verdade.news.fetcher | fetching G1
    """
    if not _logging_initialized:
        setup_logging()

    return StageLogAdapter(logging.getLogger(name), stage=stage or Stage.UNKNOWN)


def get_request_logger(
    name: str,
    stage: Optional[Stage] = None,
    request_id: Optional[str] = None
) -> StageLogAdapter:
    """
    get a logger bound to a single request.

    the request id is stored in the record extras and used as message prefix.

    args:
        name: logger name (typically __name__ of calling module)
        stage: stage context (default: UNKNOWN)
        request_id: unique request identifier

    returns:
        logger adapter with stage and request id context
    """
    if not _logging_initialized:
        setup_logging()

    extra = {}
    if request_id:
        extra["request_id"] = request_id

    adapter = StageLogAdapter(logging.getLogger(name), stage=stage or Stage.UNKNOWN, extra=extra)
    if request_id:
        adapter.set_prefix(f"[{request_id}]")
    return adapter
