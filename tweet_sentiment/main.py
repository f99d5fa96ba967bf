"""
Process entry point: run one incremental sync and exit.

Exit codes: 0 on completion, 1 when the run fails, 2 on invalid configuration.
"""

import asyncio
import logging
import time
from typing import Optional

from tweet_sentiment.clients.twitter_client import TwitterClient
from tweet_sentiment.config.settings import Settings, load_settings
from tweet_sentiment.core.exceptions import ConfigError
from tweet_sentiment.core.pipeline import RunSummary, SyncPipeline
from tweet_sentiment.core.scorer import SentimentScorer
from tweet_sentiment.monitoring.metrics import PipelineMetricsExporter
from tweet_sentiment.storage.factory import open_sink
from tweet_sentiment.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


async def run(settings: Settings, metrics_exporter: Optional[PipelineMetricsExporter] = None) -> RunSummary:
    """Build the collaborators from settings, run the pipeline once and release them."""
    twitter_client = TwitterClient(
        settings.TWITTER_API_BASE_URL,
        settings.TWITTER_BEARER_TOKEN,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )
    scorer = SentimentScorer(
        settings.COGNITIVE_SERVICE_ENDPOINT,
        settings.COGNITIVE_SERVICE_KEY,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )
    try:
        sink = await open_sink(settings)
        try:
            pipeline = SyncPipeline(settings, twitter_client, scorer, sink, metrics_exporter=metrics_exporter)
            return await pipeline.run()
        finally:
            await sink.close()
    finally:
        await scorer.close()
        await twitter_client.close()


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        logger.critical(f"Invalid configuration, aborting: {e}")
        return 2

    setup_logging(settings.LOGGING_CONFIG_PATH, settings.LOG_LEVEL)

    metrics_exporter = None
    if settings.METRICS_PORT:
        metrics_exporter = PipelineMetricsExporter(settings.METRICS_PORT)
        metrics_exporter.start_server()

    logger.info("Starting tweet sentiment sync")
    start = time.time()
    try:
        summary = asyncio.run(run(settings, metrics_exporter))
    except KeyboardInterrupt:
        logger.info("Sync stopped by user (KeyboardInterrupt).")
        return 1
    except Exception as e:
        logger.critical(f"Sync failed: {e}", exc_info=True)
        return 1

    logger.info(f"Sync completed in {time.time() - start:.2f} seconds: {summary}")
    return 0
