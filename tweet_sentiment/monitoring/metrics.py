"""Prometheus metrics for monitoring the tweet sentiment sync."""

import logging

from prometheus_client import Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

# Define metrics
PAGES_FETCHED = Counter(
    "tweet_sentiment_pages_fetched_total",
    "Number of timeline pages fetched from the source API",
)

RECORDS_FETCHED = Counter(
    "tweet_sentiment_records_fetched_total",
    "Number of tweets fetched from the source API",
)

SCORING_REQUESTS = Counter(
    "tweet_sentiment_scoring_requests_total",
    "Number of batches submitted to the scoring API",
)

RECORDS_SCORED = Counter(
    "tweet_sentiment_records_scored_total",
    "Number of sentiment results returned by the scoring API",
)

RECORDS_DROPPED = Counter(
    "tweet_sentiment_records_dropped_total",
    "Number of tweets dropped because no sentiment result matched them",
)

RECORDS_PERSISTED = Counter(
    "tweet_sentiment_records_persisted_total",
    "Number of enriched tweets upserted into the sink",
)

RUN_FAILURES = Counter(
    "tweet_sentiment_run_failures_total",
    "Number of pipeline runs that failed",
    ["stage"],
)

REQUEST_DURATION = Histogram(
    "tweet_sentiment_request_duration_seconds",
    "Duration of outbound requests in seconds",
    ["target"],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)


class PipelineMetricsExporter:
    """Prometheus metrics exporter for the sync pipeline."""

    def __init__(self, port: int = 8000):
        """
        Initialize the Prometheus exporter.

        Args:
            port: Port to expose metrics on
        """
        self.port = port
        self.server_started = False

    def start_server(self) -> None:
        """Start the Prometheus metrics server."""
        if not self.server_started:
            try:
                start_http_server(self.port)
                self.server_started = True
                logger.info(f"Started Prometheus metrics server on port {self.port}")
            except Exception as e:
                logger.error(f"Failed to start Prometheus metrics server: {str(e)}")

    def record_page_fetched(self, record_count: int) -> None:
        PAGES_FETCHED.inc()
        RECORDS_FETCHED.inc(record_count)

    def record_scoring_request(self, result_count: int) -> None:
        SCORING_REQUESTS.inc()
        RECORDS_SCORED.inc(result_count)

    def record_dropped(self, count: int) -> None:
        if count:
            RECORDS_DROPPED.inc(count)

    def record_persisted(self) -> None:
        RECORDS_PERSISTED.inc()

    def record_run_failure(self, stage: str) -> None:
        RUN_FAILURES.labels(stage=stage).inc()

    def time_request(self, target: str):
        """
        Create a context manager for timing an outbound request.

        Args:
            target: Which collaborator is called ("source", "scoring", "sink")

        Returns:
            Context manager that records the request duration
        """
        return REQUEST_DURATION.labels(target=target).time()
