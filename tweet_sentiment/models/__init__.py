"""
Models package for the tweet sentiment sync.

This package contains the SQLAlchemy ORM model of the document store and the Pydantic DTOs.
"""

from .base import Base
from .tweet_sentiment_orm import TweetSentimentORM

from .dtos import (
    ConfidenceScores,
    DocumentError,
    EnrichedTweet,
    PageMeta,
    SentenceSentiment,
    SentimentLabel,
    SentimentResponse,
    SentimentResult,
    TimelinePage,
    Tweet,
    TwitterUser,
    UserInformation,
)

__all__ = [
    "Base",
    "TweetSentimentORM",
    "ConfidenceScores",
    "DocumentError",
    "EnrichedTweet",
    "PageMeta",
    "SentenceSentiment",
    "SentimentLabel",
    "SentimentResponse",
    "SentimentResult",
    "TimelinePage",
    "Tweet",
    "TwitterUser",
    "UserInformation",
]
