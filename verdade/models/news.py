"""
data models for the news aggregation flow.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedEncoding(str, Enum):
    """character encodings a feed may be served in"""
    UTF8 = "utf-8"
    LATIN1 = "iso-8859-1"


class FeedSource(BaseModel):
    """a single RSS feed of a category"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="display name shown next to each item")
    url: str = Field(..., description="absolute URL of the RSS document")
    encoding: Optional[FeedEncoding] = Field(
        default=None,
        description="forces the decoding of this feed, skipping detection"
    )


class NewsItem(BaseModel):
    """one headline extracted from a feed"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Senado aprova projeto que altera regras do Marco Civil",
                "link": "https://g1.globo.com/politica/noticia/2026/03/02/senado-aprova.ghtml",
                "description": "Texto segue agora para sanção presidencial.",
                "pubDate": "Mon, 02 Mar 2026 14:30:00 -0300",
                "source": "G1 Política"
            }
        }
    )

    title: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)
    description: str = Field(default="", description="plain text, at most 200 characters")
    pubDate: str = Field(..., description="date as supplied by the feed, used for sorting only")
    source: str


class FeedFetchResult(BaseModel):
    """outcome of fetching and parsing one feed; error is None on success"""
    source: FeedSource
    items: List[NewsItem] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AggregationResult(BaseModel):
    """merged output of every feed of a category"""
    category: str
    news: List[NewsItem] = Field(default_factory=list)
    failed_sources: List[str] = Field(default_factory=list)
