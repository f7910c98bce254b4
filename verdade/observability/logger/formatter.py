"""
formatter and adapter that carry the request stage on every record.
"""

import logging
from typing import Optional

from verdade.observability.logger.stage import Stage


class StageLogFormatter(logging.Formatter):
    """
    formatter that guarantees a 'stage' attribute on every record.

    records emitted by third-party libraries (httpx, uvicorn) never go through
    our adapter, so they get tagged as unknown here.
    """

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "stage"):
            record.stage = Stage.UNKNOWN.value

        return super().format(record)


class StageLogAdapter(logging.LoggerAdapter):
    """
    logger adapter that injects the stage and an optional message prefix.

    the prefix is how endpoints tag every line of a request with its id:

        >>> logger = get_logger(__name__, Stage.VERIFICATION)
        >>> logger.set_prefix("[aB3xK9pQ2mZt]")
        >>> logger.info("calling gateway")
        # output: [aB3xK9pQ2mZt] calling gateway
    """

    def __init__(
        self,
        logger: logging.Logger,
        stage: Optional[Stage] = None,
        extra: Optional[dict] = None
    ):
        self.stage = stage or Stage.UNKNOWN
        self._prefix: Optional[str] = None

        if extra is None:
            extra = {}
        extra["stage"] = self.stage.value

        super().__init__(logger, extra)

    def set_prefix(self, prefix: str) -> None:
        """set a prefix prepended to every following message"""
        self._prefix = prefix

    def clear_prefix(self) -> None:
        self._prefix = None

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        """
        prepend the prefix and merge the stage into the record extras.

        args:
            msg: log message
            kwargs: keyword arguments passed to the logging call

        returns:
            tuple of (message, kwargs) with stage in extra
        """
        if self._prefix:
            msg = f"{self._prefix} {msg}"

        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        extra["stage"] = self.stage.value
        kwargs["extra"] = extra

        return msg, kwargs
