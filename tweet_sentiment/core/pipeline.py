"""
Main Pipeline Orchestrator for the tweet sentiment sync.

Coordinates one incremental run: read the resume cursor, fetch every newer
tweet, then score, join and persist the tweets batch by batch. The timeline
arrives newest first, so tweets are processed oldest first: the newest
persisted id never passes a tweet that is not persisted yet. Batches run
strictly one after another and any error aborts the run and is re-raised.
Batches persisted before the failure stay persisted, and the next run
refetches everything after the newest of them.
"""
import logging
from contextlib import nullcontext
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from tweet_sentiment.clients.twitter_client import TwitterClient
from tweet_sentiment.config.settings import Settings
from tweet_sentiment.core.batcher import partition
from tweet_sentiment.core.cursor import CursorStore, id_sort_key
from tweet_sentiment.core.joiner import join
from tweet_sentiment.core.paginator import TimelinePaginator
from tweet_sentiment.core.scorer import SentimentScorer
from tweet_sentiment.models.dtos import EnrichedTweet, Tweet
from tweet_sentiment.storage.data_sink import SentimentSink

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    READING_CURSOR = "reading_cursor"
    PAGINATING = "paginating"
    BATCHING = "batching"
    SCORING = "scoring"
    JOINING = "joining"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunSummary:
    """Counts for a completed run."""

    since_id: Optional[str] = None
    fetched: int = 0
    batches: int = 0
    scored: int = 0
    persisted: int = 0
    dropped: int = 0


class SyncPipeline:
    """
    Orchestrates the incremental sync.
    """

    def __init__(
        self,
        settings: Settings,
        twitter_client: TwitterClient,
        scorer: SentimentScorer,
        sink: SentimentSink,
        metrics_exporter=None,
    ):
        """
        Wires the pipeline components together.

        Args:
            settings: Settings built once at process start
            twitter_client: Source API client
            scorer: Sentiment scorer
            sink: Storage backend for enriched tweets
            metrics_exporter: Optional Prometheus exporter
        """
        self.settings = settings
        self.twitter_client = twitter_client
        self.scorer = scorer
        self.sink = sink
        self.metrics_exporter = metrics_exporter
        self.cursor_store = CursorStore(sink, record_type=settings.RECORD_TYPE)
        self.paginator = TimelinePaginator(
            twitter_client,
            page_size=settings.TIMELINE_PAGE_SIZE,
            exclude=settings.TIMELINE_EXCLUDE,
            max_pages=settings.MAX_PAGES_PER_RUN,
            metrics_exporter=metrics_exporter,
        )
        self.batch_size = settings.SCORING_BATCH_SIZE
        self.record_type = settings.RECORD_TYPE
        self.state = PipelineState.IDLE

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state

    def _timer(self, target: str):
        return self.metrics_exporter.time_request(target) if self.metrics_exporter else nullcontext()

    async def run(self) -> RunSummary:
        """
        Runs one sync cycle.

        Returns:
            Counts for the completed run.

        Raises:
            SyncError: Any unrecovered error from a stage; the state is left at FAILED.
        """
        self.state = PipelineState.IDLE
        try:
            return await self._run()
        except Exception as e:
            failed_stage = self.state.value
            self.state = PipelineState.FAILED
            if self.metrics_exporter:
                self.metrics_exporter.record_run_failure(failed_stage)
            logger.error(f"Pipeline run failed while {failed_stage}: {e}", exc_info=True)
            raise

    async def _run(self) -> RunSummary:
        self._transition(PipelineState.READING_CURSOR)
        with self._timer("sink"):
            cursor = await self.cursor_store.read()
        summary = RunSummary(since_id=cursor.since_id)

        self._transition(PipelineState.PAGINATING)
        with self._timer("source"):
            user = await self.twitter_client.get_user_by_username(self.settings.TWITTER_USERNAME)
        tweets = await self.paginator.fetch_all(user.data.id, cursor.since_id)
        tweets = sorted(tweets, key=lambda tweet: id_sort_key(tweet.id))
        summary.fetched = len(tweets)
        logger.info(f"Number of tweets: {len(tweets)}")

        self._transition(PipelineState.BATCHING)
        batches = partition(tweets, self.batch_size)
        summary.batches = len(batches)
        logger.info(f"Chunks: {len(batches)}")

        for index, batch in enumerate(batches, 1):
            logger.debug(f"Processing batch {index}/{len(batches)}")
            enriched = await self._process_batch(batch, summary)
            summary.persisted += len(enriched)

        self._transition(PipelineState.DONE)
        logger.info(
            f"Pipeline run finished. Fetched: {summary.fetched}, Persisted: {summary.persisted}, "
            f"Dropped: {summary.dropped}"
        )
        return summary

    async def _process_batch(self, batch: List[Tweet], summary: RunSummary) -> List[EnrichedTweet]:
        self._transition(PipelineState.SCORING)
        with self._timer("scoring"):
            results = await self.scorer.score(batch)
        summary.scored += len(results)
        if self.metrics_exporter:
            self.metrics_exporter.record_scoring_request(len(results))

        self._transition(PipelineState.JOINING)
        enriched = join(batch, results, record_type=self.record_type)
        matched_ids = {record.id for record in enriched}
        dropped_ids = [tweet.id for tweet in batch if tweet.id not in matched_ids]
        if dropped_ids:
            summary.dropped += len(dropped_ids)
            if self.metrics_exporter:
                self.metrics_exporter.record_dropped(len(dropped_ids))
            logger.warning(f"No sentiment returned for {len(dropped_ids)} tweets, dropping: {dropped_ids}")

        self._transition(PipelineState.PERSISTING)
        for record in enriched:
            with self._timer("sink"):
                await self.sink.upsert(record)
            if self.metrics_exporter:
                self.metrics_exporter.record_persisted()
        return enriched
