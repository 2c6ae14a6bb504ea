"""Pydantic models for ticker records and ticker queries."""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field, field_serializer

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

END_OF_DAY = time(23, 59, 59)


class Ticker(BaseModel):
    """Price snapshot of a coin at a point in time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: str = Field(..., min_length=1)
    name: str
    price: float
    market_cap: float = Field(..., alias="marketCap")
    last_updated: datetime = Field(..., alias="lastUpdated")

    @field_serializer("last_updated", when_used="json")
    def _format_last_updated(self, value: datetime) -> str:
        return value.strftime(TIMESTAMP_FORMAT)


class TickerRequest(BaseModel):
    """Symbol plus an inclusive range of calendar days."""

    symbol: str
    start: date
    end: date

    def start_at(self) -> datetime:
        """First second of the start day."""
        return datetime.combine(self.start, time.min)

    def end_at(self) -> datetime:
        """Last second of the end day."""
        return datetime.combine(self.end, END_OF_DAY)
