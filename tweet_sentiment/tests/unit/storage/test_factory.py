import pytest

from tweet_sentiment.storage.document_sink import DocumentStoreSink
from tweet_sentiment.storage.factory import open_sink
from tweet_sentiment.storage.http_sink import HttpBackendSink


@pytest.mark.asyncio
async def test_open_sink_defaults_to_http_backend(settings):
    sink = await open_sink(settings)

    assert isinstance(sink, HttpBackendSink)
    assert sink.backend_url == "http://backend.test"
    await sink.close()


@pytest.mark.asyncio
async def test_open_sink_initializes_document_store(settings, tmp_path):
    settings.SINK_BACKEND = "document"
    settings.DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'sync.db'}"

    sink = await open_sink(settings)
    try:
        assert isinstance(sink, DocumentStoreSink)
        assert await sink.read_highest_id("tweet") is None
    finally:
        await sink.close()
