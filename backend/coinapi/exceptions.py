"""Errors raised by the ticker query path."""

from datetime import datetime


class TickerApiError(Exception):
    """Base class for errors surfaced by the API."""


class InvalidRange(TickerApiError):
    """Requested window is longer than the allowed number of days."""

    def __init__(self, start: datetime, end: datetime, days: int, max_days: int) -> None:
        self.start = start
        self.end = end
        self.days = days
        self.max_days = max_days
        super().__init__(
            f"Maximum number of days for full queries can not exceed {max_days} calendar days"
        )


class StoreUnavailable(TickerApiError):
    """The ticker store could not be reached."""
