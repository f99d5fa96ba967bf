"""
Resume cursor for incremental runs.

The cursor is never written explicitly: it is derived from the sink, which
always holds the newest persisted tweet.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tweet_sentiment.storage.data_sink import SentimentSink

logger = logging.getLogger(__name__)


def id_sort_key(identifier: str) -> Tuple[int, str]:
    """
    Ordering key for tweet identifiers.

    Twitter ids are decimal strings without leading zeros, so comparing by
    length first and then lexicographically matches their numeric order while
    keeping the id itself untouched. The document sink orders the same way.
    """
    return (len(identifier), identifier)


@dataclass(frozen=True)
class Cursor:
    """Identifier of the newest tweet processed by a prior run, if any."""

    since_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.since_id is None

    def admits(self, record_id: str) -> bool:
        """True if `record_id` is strictly newer than the cursor."""
        if self.since_id is None:
            return True
        return id_sort_key(record_id) > id_sort_key(self.since_id)


class CursorStore:
    """Reads the resume cursor from the sink at the start of a run."""

    def __init__(self, sink: SentimentSink, record_type: str = "tweet"):
        self.sink = sink
        self.record_type = record_type

    async def read(self) -> Cursor:
        logger.info("Getting highest tweet id")
        highest_id = await self.sink.read_highest_id(self.record_type)
        if highest_id is None:
            logger.info("No tweets found, starting from the beginning of the timeline")
            return Cursor()
        logger.info(f"Highest tweet id: {highest_id}")
        return Cursor(since_id=highest_id)
