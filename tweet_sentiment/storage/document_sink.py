"""
SQLAlchemy-based document storage backend for enriched tweets.

Each enriched tweet is one row of the `tweet_sentiments` table keyed by the
tweet id, with the sentiment result kept as a JSON document. PostgreSQL is the
production target; SQLite is supported for local runs and tests.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from tweet_sentiment.core.exceptions import SinkError
from tweet_sentiment.models.base import Base
from tweet_sentiment.models.dtos import EnrichedTweet
from tweet_sentiment.models.tweet_sentiment_orm import TweetSentimentORM
from tweet_sentiment.utils.db_session import create_engine, create_session_factory, session_scope

logger = logging.getLogger(__name__)

# Dialects with an INSERT ... ON CONFLICT DO UPDATE construct.
UPSERT_DIALECTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


def _backend_name(database_url: str) -> str:
    try:
        return make_url(database_url).get_backend_name()
    except ArgumentError as e:
        raise SinkError(f"Invalid DATABASE_URL: {e}") from e


class DocumentStoreSink:
    """SentimentSink storing enriched tweets as documents via SQLAlchemy."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
        engine: Optional[AsyncEngine] = None,
    ):
        """
        Initialize the document sink.

        Args:
            database_url: SQLAlchemy async URL, e.g. postgresql+asyncpg://user:pw@host/db
            echo: Log emitted SQL
            engine: Pre-built engine; takes precedence over database_url
        """
        if engine is None and not database_url:
            raise SinkError("DocumentStoreSink needs a database_url or an engine")
        dialect = engine.dialect.name if engine is not None else _backend_name(database_url)
        if dialect not in UPSERT_DIALECTS:
            raise SinkError(
                f"Unsupported document store dialect '{dialect}'; expected one of {sorted(UPSERT_DIALECTS)}"
            )
        self.engine = engine or create_engine(database_url, echo=echo)
        self.session_factory = create_session_factory(self.engine)
        logger.info(f"Document sink initialized with dialect: {self.engine.dialect.name}")

    async def initialize(self) -> None:
        """Create the documents table if it does not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise SinkError(f"Failed to initialize document store: {e}") from e

    def _insert(self):
        return UPSERT_DIALECTS[self.engine.dialect.name](TweetSentimentORM)

    async def read_highest_id(self, record_type: str) -> Optional[str]:
        # Length first so decimal ids sort numerically without reformatting them.
        query = (
            select(TweetSentimentORM.id)
            .where(TweetSentimentORM.record_type == record_type)
            .order_by(func.length(TweetSentimentORM.id).desc(), TweetSentimentORM.id.desc())
            .limit(1)
        )
        try:
            async with session_scope(self.session_factory) as session:
                result = await session.execute(query)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise SinkError(f"Failed to read highest {record_type} id: {e}") from e

    async def upsert(self, record: EnrichedTweet) -> None:
        payload = record.to_payload()
        stmt = self._insert().values(
            id=record.id,
            record_type=record.record_type,
            text=record.text,
            sentiment=payload["sentiment"],
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                "record_type": stmt.excluded.record_type,
                "text": stmt.excluded.text,
                "sentiment": stmt.excluded.sentiment,
                "updated_at": func.now(),
            },
        )
        try:
            async with session_scope(self.session_factory) as session:
                await session.execute(stmt)
        except SQLAlchemyError as e:
            raise SinkError(f"Failed to upsert tweet {record.id}: {e}") from e
        logger.debug(f"Upserted tweet {record.id} into {TweetSentimentORM.__tablename__}")

    async def close(self) -> None:
        await self.engine.dispose()
