"""Tests for TickerRepository (unit tests with mocked Neo4j)."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime

from neo4j.exceptions import ServiceUnavailable, SessionExpired
from neo4j.time import DateTime

from coinapi.db.neo4j_client import Neo4jClient
from coinapi.exceptions import StoreUnavailable
from coinapi.repositories.ticker_repository import (
    FIND_IN_RANGE_QUERY,
    TickerRepository,
    record_to_ticker,
)


def _make_record(symbol, when, price=6500.0):
    """Helper to build a record matching the Neo4j result shape."""
    return {
        "symbol": symbol,
        "name": "Bitcoin",
        "price": price,
        "marketCap": price * 17_000_000,
        "lastUpdated": when,
    }


@pytest.fixture
def client():
    mock = MagicMock(spec=Neo4jClient)
    mock.execute_query = AsyncMock(return_value=[])
    return mock


class TestQuery:
    def test_bounds_are_strict(self):
        assert "t.lastUpdated > $start" in FIND_IN_RANGE_QUERY
        assert "t.lastUpdated < $end" in FIND_IN_RANGE_QUERY
        assert ">=" not in FIND_IN_RANGE_QUERY
        assert "<=" not in FIND_IN_RANGE_QUERY

    def test_orders_ascending_by_last_updated(self):
        assert "ORDER BY t.lastUpdated ASC" in FIND_IN_RANGE_QUERY

    def test_no_limit(self):
        assert "LIMIT" not in FIND_IN_RANGE_QUERY


class TestFindInRange:
    @pytest.mark.asyncio
    async def test_passes_symbol_and_bounds_as_parameters(self, client):
        repo = TickerRepository(client)
        start = datetime(2018, 6, 1, 0, 0, 0)
        end = datetime(2018, 6, 10, 23, 59, 59)

        await repo.find_in_range("BTC", start, end)

        client.execute_query.assert_awaited_once()
        query, params = client.execute_query.call_args[0]
        assert query == FIND_IN_RANGE_QUERY
        assert params == {"symbol": "BTC", "start": start, "end": end}

    @pytest.mark.asyncio
    async def test_maps_records_in_store_order(self, client):
        client.execute_query.return_value = [
            _make_record("BTC", datetime(2018, 6, 2, 8, 0), price=6400.0),
            _make_record("BTC", datetime(2018, 6, 2, 9, 0), price=6450.0),
            _make_record("BTC", datetime(2018, 6, 3, 8, 0), price=6500.0),
        ]
        repo = TickerRepository(client)

        result = await repo.find_in_range("BTC", datetime(2018, 6, 1), datetime(2018, 6, 10))

        assert [t.price for t in result] == [6400.0, 6450.0, 6500.0]
        assert all(a.last_updated <= b.last_updated for a, b in zip(result, result[1:]))
        assert result[0].market_cap == 6400.0 * 17_000_000

    @pytest.mark.asyncio
    async def test_empty_result(self, client):
        repo = TickerRepository(client)

        result = await repo.find_in_range("NOPE", datetime(2018, 6, 1), datetime(2018, 6, 10))

        assert result == []

    @pytest.mark.asyncio
    async def test_duplicates_are_kept(self, client):
        when = datetime(2018, 6, 2, 8, 0)
        client.execute_query.return_value = [_make_record("BTC", when), _make_record("BTC", when)]
        repo = TickerRepository(client)

        result = await repo.find_in_range("BTC", datetime(2018, 6, 1), datetime(2018, 6, 10))

        assert len(result) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [ServiceUnavailable("down"), SessionExpired("gone")])
    async def test_connectivity_errors_become_store_unavailable(self, client, error):
        client.execute_query.side_effect = error
        repo = TickerRepository(client)

        with pytest.raises(StoreUnavailable):
            await repo.find_in_range("BTC", datetime(2018, 6, 1), datetime(2018, 6, 10))

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, client):
        client.execute_query.side_effect = RuntimeError("bad query")
        repo = TickerRepository(client)

        with pytest.raises(RuntimeError):
            await repo.find_in_range("BTC", datetime(2018, 6, 1), datetime(2018, 6, 10))


class TestRecordToTicker:
    def test_converts_neo4j_datetime(self):
        ticker = record_to_ticker(_make_record("BTC", DateTime(2018, 6, 2, 8, 30, 15)))

        assert ticker.last_updated == datetime(2018, 6, 2, 8, 30, 15)
        assert isinstance(ticker.last_updated, datetime)

    def test_keeps_native_datetime(self):
        when = datetime(2018, 6, 2, 8, 30, 15)
        ticker = record_to_ticker(_make_record("BTC", when))

        assert ticker.last_updated == when
