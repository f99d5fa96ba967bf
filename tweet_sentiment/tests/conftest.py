"""Shared fixtures for the tweet sentiment sync tests."""

import pytest

from tweet_sentiment.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        TWITTER_BEARER_TOKEN="test-bearer",
        TWITTER_USERNAME="devndive",
        COGNITIVE_SERVICE_KEY="test-key",
        SINK_BACKEND="http",
        SENTIMENT_BACKEND="http://backend.test",
    )
