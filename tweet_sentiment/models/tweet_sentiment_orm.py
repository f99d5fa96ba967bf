"""
SQLAlchemy ORM model for the 'tweet_sentiments' document table.
"""

from sqlalchemy import JSON, TIMESTAMP, Column, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from .base import Base


class TweetSentimentORM(Base):
    """
    One enriched tweet stored as a document keyed by the tweet id.

    Attributes:
        id (str): Twitter identifier of the tweet, stored exactly as received.
        record_type (str): Fixed type tag the cursor query filters on (e.g. "tweet").
        text (str): The tweet text that was scored.
        sentiment (JSON object): The full sentiment result document.
        updated_at (datetime): Timestamp of the last upsert.
    """
    __tablename__ = "tweet_sentiments"

    id = Column(Text, primary_key=True, comment="Twitter identifier of the tweet.")
    record_type = Column(Text, nullable=False, comment="Fixed record type tag.")
    text = Column(Text, nullable=False, comment="The tweet text that was scored.")
    sentiment = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        comment="Sentiment result document.",
    )
    updated_at = Column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        comment="Timestamp of the last upsert.",
    )

    __table_args__ = (
        Index("idx_tweet_sentiments_record_type", "record_type"),
    )

    def __repr__(self) -> str:
        return f"<TweetSentimentORM(id='{self.id}', record_type='{self.record_type}')>"
