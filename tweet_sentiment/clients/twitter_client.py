"""
Async client for the Twitter v2 API.

Only the two read endpoints the sync needs are wrapped: user lookup by
username and the user timeline.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from tweet_sentiment.core.exceptions import UpstreamError
from tweet_sentiment.models.dtos import TimelinePage, UserInformation

logger = logging.getLogger(__name__)


class TwitterClient:
    """Thin wrapper around httpx for the Twitter v2 endpoints."""

    def __init__(
        self,
        base_url: str,
        bearer_token: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Twitter client.

        Args:
            base_url: API base URL, e.g. https://api.twitter.com/2
            bearer_token: App bearer token supplied out of band
            timeout: Per-request timeout in seconds
            http_client: Pre-built httpx client (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.client = http_client or httpx.AsyncClient(
            headers={"Authorization": f"Bearer {bearer_token}"},
            timeout=httpx.Timeout(timeout),
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"Source API returned {response.status_code} for {path}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Source API returned a non-JSON body for {path}") from e

    async def get_user_by_username(self, username: str) -> UserInformation:
        """
        Look up a user by username.

        Raises:
            UpstreamError: On non-success status or an unexpected body
        """
        logger.info(f"Getting user information for @{username}")
        body = await self._get(f"/users/by/username/{username}")
        try:
            user = UserInformation.model_validate(body)
        except ValidationError as e:
            raise UpstreamError(f"Unexpected user lookup body for @{username}: {e}") from e
        logger.info(f"Resolved @{username} to user id {user.data.id}")
        return user

    async def get_timeline_page(
        self,
        user_id: str,
        max_results: int = 100,
        exclude: Optional[str] = "replies,retweets",
        since_id: Optional[str] = None,
        pagination_token: Optional[str] = None,
    ) -> TimelinePage:
        """
        Fetch one page of a user's tweets.

        Args:
            user_id: Numeric Twitter user id
            max_results: Page size (5-100)
            exclude: Comma separated tweet kinds to exclude
            since_id: Only return tweets newer than this id
            pagination_token: Token of the page to fetch, from the previous page's meta

        Returns:
            The parsed timeline page
        """
        params: Dict[str, Any] = {"max_results": max_results}
        if exclude:
            params["exclude"] = exclude
        if since_id is not None:
            params["since_id"] = since_id
        if pagination_token is not None:
            params["pagination_token"] = pagination_token

        logger.debug(f"Fetching tweets for user {user_id} with params {params}")
        body = await self._get(f"/users/{user_id}/tweets", params=params)
        try:
            return TimelinePage.model_validate(body)
        except ValidationError as e:
            raise UpstreamError(f"Unexpected timeline body for user {user_id}: {e}") from e
