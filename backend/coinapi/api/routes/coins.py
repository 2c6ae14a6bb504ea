"""API endpoint for coin ticker history."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from coinapi.api.dependencies import get_ticker_service
from coinapi.models.ticker import Ticker, TickerRequest
from coinapi.services.ticker_service import TickerService

router = APIRouter()


@router.get("/{symbol}", response_model=list[Ticker])
async def get_tickers(
    symbol: str,
    start: date = Query(..., description="First day of the range (YYYY-MM-DD)"),
    end: date = Query(..., description="Last day of the range (YYYY-MM-DD)"),
    service: TickerService = Depends(get_ticker_service),
):
    """
    Get ticker snapshots for a coin over a range of days.

    Example:
        GET /coins/BTC?start=2018-06-01&end=2018-06-10
    """
    ticker_request = TickerRequest(symbol=symbol, start=start, end=end)
    return await service.find(
        ticker_request.symbol,
        ticker_request.start_at(),
        ticker_request.end_at(),
    )
