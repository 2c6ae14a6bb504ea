"""Store adapter for ticker records kept as :Ticker nodes in Neo4j."""

import logging
from datetime import datetime
from typing import Any

from neo4j.exceptions import ServiceUnavailable, SessionExpired

from coinapi.db.neo4j_client import Neo4jClient
from coinapi.exceptions import StoreUnavailable
from coinapi.models.ticker import Ticker

logger = logging.getLogger(__name__)

# Both bounds are exclusive.
FIND_IN_RANGE_QUERY = """
    MATCH (t:Ticker)
    WHERE t.symbol = $symbol
      AND t.lastUpdated > $start
      AND t.lastUpdated < $end
    RETURN t.symbol AS symbol,
           t.name AS name,
           t.price AS price,
           t.marketCap AS marketCap,
           t.lastUpdated AS lastUpdated
    ORDER BY t.lastUpdated ASC
"""


def _to_native(value: Any) -> Any:
    """Convert neo4j.time values to their datetime counterparts."""
    if hasattr(value, "to_native"):
        return value.to_native()
    return value


def record_to_ticker(record: dict[str, Any]) -> Ticker:
    return Ticker(
        symbol=record["symbol"],
        name=record["name"],
        price=record["price"],
        marketCap=record["marketCap"],
        lastUpdated=_to_native(record["lastUpdated"]),
    )


class TickerRepository:
    """Reads ticker records from the store."""

    def __init__(self, client: Neo4jClient) -> None:
        self._client = client

    async def find_in_range(self, symbol: str, start: datetime, end: datetime) -> list[Ticker]:
        """
        Get all tickers for a symbol updated strictly between start and end.

        Records are returned oldest first. The whole result set is loaded.

        Raises:
            StoreUnavailable: if the store cannot be reached.
        """
        params = {"symbol": symbol, "start": start, "end": end}
        try:
            records = await self._client.execute_query(FIND_IN_RANGE_QUERY, params)
        except (ServiceUnavailable, SessionExpired) as e:
            logger.error(f"Ticker query for {symbol} failed: {e}")
            raise StoreUnavailable(f"Ticker store unavailable: {e}") from e

        logger.debug(f"Found {len(records)} tickers for {symbol} between {start} and {end}")
        return [record_to_ticker(r) for r in records]
