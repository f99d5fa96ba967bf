"""
HTTP storage backend that delegates persistence to the sentiment microservice.
"""

import logging
from typing import Optional

import httpx

from tweet_sentiment.core.exceptions import SinkError
from tweet_sentiment.models.dtos import EnrichedTweet

logger = logging.getLogger(__name__)


class HttpBackendSink:
    """
    SentimentSink backed by the sentiment backend service.

    The service exposes `GET /last-known-tweet` for the cursor and
    `POST /sentiment` for upserts. It stores a single record type, so the
    type tag is carried inside each record rather than in the cursor query.
    """

    def __init__(
        self,
        backend_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the HTTP sink.

        Args:
            backend_url: Base URL of the sentiment backend
            timeout: Per-request timeout in seconds
            http_client: Pre-built httpx client (used by tests)
        """
        self.backend_url = backend_url.rstrip("/")
        self.client = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout),
        )
        logger.info(f"HTTP sink initialized with backend: {self.backend_url}")

    async def read_highest_id(self, record_type: str) -> Optional[str]:
        url = f"{self.backend_url}/last-known-tweet"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise SinkError(f"Failed to reach {url}: {e}") from e

        if response.status_code == 404:
            return None
        if not response.is_success:
            raise SinkError(
                f"Backend returned {response.status_code} for last-known-tweet",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise SinkError("Backend returned a non-JSON last-known-tweet body") from e

        # Only a 404 means "no cursor"; a 200 must name the tweet.
        data = body.get("data") if isinstance(body, dict) else None
        last_id = data.get("id") if isinstance(data, dict) else None
        if last_id is None or str(last_id) == "":
            raise SinkError(f"Backend returned an unexpected last-known-tweet body: {body!r}")

        logger.debug(f"lastKnownTweet: {last_id}")
        return str(last_id)

    async def upsert(self, record: EnrichedTweet) -> None:
        url = f"{self.backend_url}/sentiment"
        try:
            response = await self.client.post(url, json={"data": [record.to_payload()]})
        except httpx.HTTPError as e:
            raise SinkError(f"Failed to persist tweet {record.id}: {e}") from e

        if not response.is_success:
            raise SinkError(
                f"Backend returned {response.status_code} while persisting tweet {record.id}",
                status_code=response.status_code,
            )
        logger.debug(f"Persisted tweet {record.id} to backend")

    async def close(self) -> None:
        await self.client.aclose()
