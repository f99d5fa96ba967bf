"""
Sentiment scorer backed by the Azure Text Analytics sentiment endpoint.
"""

import logging
from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from tweet_sentiment.core.exceptions import ScoringError
from tweet_sentiment.models.dtos import SentimentResponse, SentimentResult, Tweet

logger = logging.getLogger(__name__)


class SentimentScorer:
    """
    Submits batches of tweets to the scoring service.

    The service may omit documents it could not score, so the returned list
    can be shorter than the batch.
    """

    def __init__(
        self,
        endpoint: str,
        subscription_key: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the scorer.

        Args:
            endpoint: Full URL of the sentiment endpoint
            subscription_key: Value for the Ocp-Apim-Subscription-Key header
            timeout: Per-request timeout in seconds
            http_client: Pre-built httpx client (used by tests)
        """
        self.endpoint = endpoint
        self.client = http_client or httpx.AsyncClient(
            headers={
                "Ocp-Apim-Subscription-Key": subscription_key,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout),
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def score(self, batch: Sequence[Tweet]) -> List[SentimentResult]:
        """
        Score one batch of tweets.

        Args:
            batch: Tweets to score (at most the service's document limit)

        Returns:
            Sentiment results for the documents the service could score

        Raises:
            ScoringError: On transport failure, non-success status or malformed body
        """
        if not batch:
            return []

        request_body = {"documents": [{"id": tweet.id, "text": tweet.text} for tweet in batch]}
        logger.info(f"Getting sentiment for {len(batch)} tweets")

        try:
            response = await self.client.post(self.endpoint, json=request_body)
        except httpx.HTTPError as e:
            raise ScoringError(f"Scoring request failed: {e}") from e

        if not response.is_success:
            raise ScoringError(
                f"Scoring API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            parsed = SentimentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ScoringError(f"Malformed scoring response: {e}") from e

        for error in parsed.errors:
            logger.warning(f"Scoring service could not score tweet {error.id}: {error.error}")

        logger.debug(f"Scoring service returned {len(parsed.documents)}/{len(batch)} documents")
        return parsed.documents
