"""
Source paginator.

Follows the timeline's pagination tokens until the source stops returning
one, accumulating every tweet newer than the resume cursor.
"""

import logging
from contextlib import nullcontext
from typing import List, Optional

from tweet_sentiment.clients.twitter_client import TwitterClient
from tweet_sentiment.core.cursor import Cursor
from tweet_sentiment.core.exceptions import PaginationLoopError
from tweet_sentiment.models.dtos import Tweet

logger = logging.getLogger(__name__)


class TimelinePaginator:
    """Fetches all tweets of a user newer than a given id."""

    def __init__(
        self,
        client: TwitterClient,
        page_size: int = 100,
        exclude: Optional[str] = "replies,retweets",
        max_pages: int = 100,
        metrics_exporter=None,
    ):
        """
        Initialize the paginator.

        Args:
            client: Twitter API client
            page_size: Tweets requested per page
            exclude: Tweet kinds excluded from the timeline
            max_pages: Page requests allowed per run before giving up
            metrics_exporter: Optional Prometheus exporter
        """
        self.client = client
        self.page_size = page_size
        self.exclude = exclude
        self.max_pages = max_pages
        self.metrics_exporter = metrics_exporter

    async def fetch_all(self, user_id: str, since_id: Optional[str] = None) -> List[Tweet]:
        """
        Fetch every tweet newer than `since_id`, in arrival order.

        Args:
            user_id: Numeric Twitter user id
            since_id: Resume cursor; None fetches the whole available timeline

        Returns:
            All fetched tweets

        Raises:
            UpstreamError: If any page request fails
            PaginationLoopError: If the source still returns a token after max_pages pages
        """
        logger.info(f"Getting tweets by userId: {user_id}")
        cursor = Cursor(since_id=since_id)
        tweets: List[Tweet] = []
        pagination_token: Optional[str] = None
        pages = 0

        while True:
            timer = self.metrics_exporter.time_request("source") if self.metrics_exporter else None
            with timer if timer else nullcontext():
                page = await self.client.get_timeline_page(
                    user_id,
                    max_results=self.page_size,
                    exclude=self.exclude,
                    since_id=since_id,
                    pagination_token=pagination_token,
                )
            pages += 1

            page_tweets = page.tweets
            logger.debug(
                f"Page {pages}: {len(page_tweets)} tweets, "
                f"result_count={page.meta.result_count}, next_token={page.next_token}"
            )

            admitted = 0
            for tweet in page_tweets:
                if cursor.admits(tweet.id):
                    tweets.append(tweet)
                    admitted += 1
                else:
                    logger.warning(f"Skipping tweet {tweet.id}: not newer than cursor {since_id}")
            if self.metrics_exporter:
                self.metrics_exporter.record_page_fetched(admitted)

            pagination_token = page.next_token
            if pagination_token is None:
                break
            if pages >= self.max_pages:
                raise PaginationLoopError(
                    f"Source still returned a pagination token after {pages} pages for user {user_id}"
                )

        logger.info(f"Fetched {len(tweets)} tweets in {pages} pages")
        return tweets
