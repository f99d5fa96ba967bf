from unittest.mock import AsyncMock, MagicMock

import pytest

from tweet_sentiment.core.cursor import Cursor, CursorStore, id_sort_key


def test_empty_cursor_admits_everything():
    cursor = Cursor()

    assert cursor.is_empty
    assert cursor.admits("1")


def test_cursor_admits_only_strictly_newer_ids():
    cursor = Cursor(since_id="100")

    assert cursor.admits("101")
    assert not cursor.admits("100")
    assert not cursor.admits("99")


def test_cursor_compares_ids_numerically():
    # Lexicographically "99" > "100"; numerically it is older.
    cursor = Cursor(since_id="99")

    assert cursor.admits("100")
    assert id_sort_key("1500000000000000000") > id_sort_key("999999999999999999")


@pytest.mark.asyncio
async def test_cursor_store_reads_highest_id_from_sink():
    sink = MagicMock()
    sink.read_highest_id = AsyncMock(return_value="1234")

    cursor = await CursorStore(sink, record_type="tweet").read()

    assert cursor == Cursor(since_id="1234")
    sink.read_highest_id.assert_awaited_once_with("tweet")


@pytest.mark.asyncio
async def test_cursor_store_returns_empty_cursor_for_empty_sink():
    sink = MagicMock()
    sink.read_highest_id = AsyncMock(return_value=None)

    cursor = await CursorStore(sink).read()

    assert cursor.is_empty
