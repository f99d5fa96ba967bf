"""
Pydantic Data Transfer Objects (DTOs) for the sync pipeline.

They mirror the JSON exchanged with the Twitter v2 API, the text-analytics
sentiment endpoint and the sentiment backend. Field aliases keep the vendors'
camelCase names on the wire while the Python side uses snake_case.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Tweet(BaseModel):
    """A single source post. Identifiers are opaque strings assigned by Twitter."""

    id: str
    text: str

    model_config = ConfigDict(frozen=True)


class PageMeta(BaseModel):
    result_count: int = 0
    newest_id: Optional[str] = None
    oldest_id: Optional[str] = None
    next_token: Optional[str] = None


class TimelinePage(BaseModel):
    """
    One page of a user timeline.

    `data` is absent when the page holds no tweets; an absent or empty
    `meta.next_token` marks the last page.
    """

    data: Optional[List[Tweet]] = None
    meta: PageMeta = Field(default_factory=PageMeta)

    @property
    def tweets(self) -> List[Tweet]:
        return list(self.data or [])

    @property
    def next_token(self) -> Optional[str]:
        return self.meta.next_token or None


class TwitterUser(BaseModel):
    id: str
    name: str
    username: str


class UserInformation(BaseModel):
    data: TwitterUser


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    MIXED = "mixed"


class ConfidenceScores(BaseModel):
    positive: float = Field(ge=0.0, le=1.0)
    neutral: float = Field(ge=0.0, le=1.0)
    negative: float = Field(ge=0.0, le=1.0)


class SentenceSentiment(BaseModel):
    sentiment: SentimentLabel
    confidence_scores: ConfidenceScores = Field(alias="confidenceScores")
    offset: int
    length: int
    text: str

    model_config = ConfigDict(populate_by_name=True)


class SentimentResult(BaseModel):
    """Document-level sentiment, keyed by the id of the tweet it scores."""

    id: str
    sentiment: SentimentLabel
    confidence_scores: ConfidenceScores = Field(alias="confidenceScores")
    sentences: List[SentenceSentiment] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class DocumentError(BaseModel):
    """A per-document failure reported by the scoring service."""

    id: str
    error: dict = Field(default_factory=dict)


class SentimentResponse(BaseModel):
    documents: List[SentimentResult]
    errors: List[DocumentError] = Field(default_factory=list)


class EnrichedTweet(BaseModel):
    """A tweet joined with its sentiment result, ready for persistence."""

    id: str
    text: str
    sentiment: SentimentResult
    record_type: str = Field(default="tweet", alias="recordType")

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON-compatible representation using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)
