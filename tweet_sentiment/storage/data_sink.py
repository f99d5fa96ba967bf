"""Defines the SentimentSink protocol for storage backends."""

from typing import Optional, Protocol

from tweet_sentiment.models.dtos import EnrichedTweet


class SentimentSink(Protocol):
    """
    A protocol that defines the interface for all enriched-tweet sinks.

    This ensures that any storage implementation (HTTP backend, document
    store) can be used interchangeably by the pipeline.
    """

    async def read_highest_id(self, record_type: str) -> Optional[str]:
        """
        Return the id of the newest persisted record of the given type.

        Args:
            record_type: Fixed type tag the records were stored under.

        Returns:
            The highest identifier, or None when nothing is stored yet.
        """
        ...

    async def upsert(self, record: EnrichedTweet) -> None:
        """
        Insert or overwrite one enriched tweet keyed by its id.

        Calling this twice with the same id must leave a single stored record.

        Raises:
            SinkError: If the record could not be persisted.
        """
        ...

    async def close(self) -> None:
        """Release connections held by the sink."""
        ...
