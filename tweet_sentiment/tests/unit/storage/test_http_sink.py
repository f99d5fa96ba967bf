import json

import httpx
import pytest

from tweet_sentiment.core.exceptions import SinkError
from tweet_sentiment.core.joiner import join
from tweet_sentiment.storage.http_sink import HttpBackendSink
from tweet_sentiment.tests.factories import make_result, make_tweets

BACKEND = "http://backend.test"


def sink_with(handler) -> HttpBackendSink:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpBackendSink(BACKEND + "/", http_client=client)


def enriched_tweet(tweet_id: int = 1):
    tweet = make_tweets(tweet_id, 1)
    return join(tweet, [make_result(tweet[0].id)])[0]


@pytest.mark.asyncio
async def test_read_highest_id_returns_backend_id():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert str(request.url) == f"{BACKEND}/last-known-tweet"
        return httpx.Response(200, json={"data": {"id": "1511111111111111111"}})

    assert await sink_with(handler).read_highest_id("tweet") == "1511111111111111111"


@pytest.mark.asyncio
async def test_read_highest_id_is_none_on_404():
    sink = sink_with(lambda request: httpx.Response(404, json={"message": "No tweets"}))

    assert await sink.read_highest_id("tweet") is None


@pytest.mark.asyncio
async def test_read_highest_id_raises_on_server_error():
    sink = sink_with(lambda request: httpx.Response(502))

    with pytest.raises(SinkError) as exc_info:
        await sink.read_highest_id("tweet")

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"data": {}},
        {"data": []},
        {"data": "123"},
        {"data": {"id": ""}},
        {"message": "ok"},
        ["1511111111111111111"],
    ],
)
async def test_read_highest_id_rejects_malformed_success_body(body):
    sink = sink_with(lambda request: httpx.Response(200, json=body))

    with pytest.raises(SinkError):
        await sink.read_highest_id("tweet")


@pytest.mark.asyncio
async def test_read_highest_id_rejects_non_json_body():
    sink = sink_with(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(SinkError):
        await sink.read_highest_id("tweet")


@pytest.mark.asyncio
async def test_read_highest_id_accepts_numeric_id():
    sink = sink_with(lambda request: httpx.Response(200, json={"data": {"id": 1511111111111111111}}))

    assert await sink.read_highest_id("tweet") == "1511111111111111111"


@pytest.mark.asyncio
async def test_upsert_posts_single_record_envelope():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(201)

    sink = sink_with(handler)
    record = enriched_tweet(7)

    await sink.upsert(record)
    await sink.close()

    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert str(requests[0].url) == f"{BACKEND}/sentiment"
    body = json.loads(requests[0].content)
    assert body == {"data": [record.to_payload()]}
    assert body["data"][0]["id"] == "7"
    assert body["data"][0]["recordType"] == "tweet"


@pytest.mark.asyncio
async def test_upsert_raises_on_error_status():
    sink = sink_with(lambda request: httpx.Response(500))

    with pytest.raises(SinkError):
        await sink.upsert(enriched_tweet())


@pytest.mark.asyncio
async def test_upsert_wraps_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SinkError):
        await sink_with(handler).upsert(enriched_tweet())
