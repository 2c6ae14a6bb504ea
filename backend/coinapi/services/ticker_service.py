"""Service for ticker range queries."""

import logging
from datetime import datetime

from coinapi.exceptions import InvalidRange
from coinapi.models.ticker import Ticker
from coinapi.repositories.ticker_repository import TickerRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_RANGE_DAYS = 31


def span_in_days(start: datetime, end: datetime) -> int:
    """Whole days between two timestamps, independent of their order."""
    return abs(end - start).days


class TickerService:
    """Validates query windows and delegates to the repository."""

    def __init__(self, repository: TickerRepository, max_range_days: int = DEFAULT_MAX_RANGE_DAYS) -> None:
        self._repository = repository
        self.max_range_days = max_range_days

    async def find(self, symbol: str, start: datetime, end: datetime) -> list[Ticker]:
        """
        Get tickers for a symbol within a time window.

        Args:
            symbol: Coin symbol, matched exactly (e.g., "BTC")
            start: Lower bound, exclusive
            end: Upper bound, exclusive

        Returns:
            Tickers ordered by last update, as returned by the repository

        Raises:
            InvalidRange: if the window spans more than max_range_days.
        """
        days = span_in_days(start, end)
        if days > self.max_range_days:
            logger.warning(
                f"Rejected {symbol} query: {days} days between {start} and {end} "
                f"(max {self.max_range_days})"
            )
            raise InvalidRange(start, end, days, self.max_range_days)

        logger.debug(f"Querying {symbol} from {start} to {end}")
        return await self._repository.find_in_range(symbol, start, end)
