"""
stage enumeration for logging context.

every log record is tagged with the stage of the request it belongs to, so
feed fetching noise can be told apart from gateway calls in the same stream.
"""

from enum import Enum


class Stage(str, Enum):
    """stages of the verdade request lifecycle"""

    # news aggregation
    FEED_FETCH = "feed_fetch"
    FEED_PARSE = "feed_parse"
    AGGREGATION = "aggregation"

    # ai backed analyses
    VERIFICATION = "verification"
    ANALYSIS = "analysis"
    TRANSCRIPTION = "transcription"

    # supporting services
    WEB_SEARCH = "web_search"
    PERSISTENCE = "persistence"

    # api and system level
    API_INTAKE = "api_intake"
    SYSTEM = "system"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value
