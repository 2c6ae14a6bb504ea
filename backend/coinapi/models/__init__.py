"""Pydantic models for the Coin Ticker API."""

from coinapi.models.ticker import Ticker, TickerRequest

__all__ = [
    "Ticker",
    "TickerRequest",
]
