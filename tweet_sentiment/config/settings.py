from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tweet_sentiment.core.exceptions import ConfigError

CONFIG_DIR = Path(__file__).parent.resolve()
DEFAULT_LOGGING_CONFIG_PATH = CONFIG_DIR / "logging_config.yaml"

DEFAULT_SENTIMENT_ENDPOINT = (
    "https://mood-analyzer.cognitiveservices.azure.com/text/analytics/v3.2-preview.1/sentiment"
)


class Settings(BaseSettings):
    # Source API
    TWITTER_BEARER_TOKEN: str
    TWITTER_USERNAME: str
    TWITTER_API_BASE_URL: str = "https://api.twitter.com/2"
    TIMELINE_PAGE_SIZE: int = Field(default=100, ge=5, le=100)
    TIMELINE_EXCLUDE: str = "replies,retweets"
    MAX_PAGES_PER_RUN: int = Field(default=100, ge=1)

    # Scoring API
    COGNITIVE_SERVICE_KEY: str
    COGNITIVE_SERVICE_ENDPOINT: str = DEFAULT_SENTIMENT_ENDPOINT
    # The sentiment endpoint accepts at most 10 documents per request.
    SCORING_BATCH_SIZE: int = Field(default=10, ge=1, le=10)

    # Sink
    SINK_BACKEND: Literal["http", "document"] = "http"
    SENTIMENT_BACKEND: Optional[str] = None
    DATABASE_URL: Optional[str] = None
    RECORD_TYPE: str = "tweet"

    # Runtime
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOGGING_CONFIG_PATH: str = str(DEFAULT_LOGGING_CONFIG_PATH)
    METRICS_PORT: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_sink_backend(self) -> "Settings":
        """Each sink backend needs its own endpoint setting."""
        if self.SINK_BACKEND == "http" and not self.SENTIMENT_BACKEND:
            raise ValueError("SENTIMENT_BACKEND must be set when SINK_BACKEND is 'http'")
        if self.SINK_BACKEND == "document" and not self.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set when SINK_BACKEND is 'document'")
        return self


def load_settings(env_file: Optional[str] = ".env", **overrides) -> Settings:
    """
    Build the settings object once at process start.

    Args:
        env_file: Optional .env file to read in addition to the process environment.
        **overrides: Explicit values that take precedence over the environment.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigError: If any required setting is missing or invalid.
    """
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "settings"
            problems.append(f"{location}: {error['msg']}")
        raise ConfigError("Invalid configuration: " + "; ".join(problems)) from e
