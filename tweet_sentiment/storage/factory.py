"""Selects the sink implementation from configuration."""

import logging

from tweet_sentiment.config.settings import Settings
from tweet_sentiment.core.exceptions import ConfigError
from tweet_sentiment.storage.data_sink import SentimentSink
from tweet_sentiment.storage.document_sink import DocumentStoreSink
from tweet_sentiment.storage.http_sink import HttpBackendSink

logger = logging.getLogger(__name__)


async def open_sink(settings: Settings) -> SentimentSink:
    """
    Build and initialize the sink named by SINK_BACKEND.

    Raises:
        ConfigError: If the backend is unknown.
        SinkError: If the document store cannot be initialized.
    """
    if settings.SINK_BACKEND == "http":
        logger.info("Using HTTP backend sink.")
        return HttpBackendSink(settings.SENTIMENT_BACKEND, timeout=settings.HTTP_TIMEOUT_SECONDS)

    if settings.SINK_BACKEND == "document":
        logger.info("Using SQLAlchemy document store sink.")
        sink = DocumentStoreSink(settings.DATABASE_URL, echo=settings.DEBUG)
        try:
            await sink.initialize()
        except Exception:
            await sink.close()
            raise
        return sink

    raise ConfigError(f"Unknown SINK_BACKEND: {settings.SINK_BACKEND}")
