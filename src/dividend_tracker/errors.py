"""Dividend Tracker Exceptions.

Typed exceptions raised by the tracker. Malformed activities are never
reported here: the extractor drops them instead.
"""

from typing import Any, Optional


class DividendTrackerError(Exception):
    """Base exception for all dividend tracker errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDividendDateError(DividendTrackerError, ValueError):
    """Raised when a dividend record's date is not a valid ISO-8601 date."""

    def __init__(
        self,
        value: Any,
        account_id: Optional[str] = None,
        symbol: Optional[str] = None,
    ):
        super().__init__(
            f"Invalid dividend date: {value!r}",
            details={"date": value, "account_id": account_id, "symbol": symbol},
        )
        self.value = value


class DividendDataUnavailableError(DividendTrackerError):
    """Raised when the host cannot supply accounts or activities."""

    def __init__(self, message: str = "Dividend input data unavailable", source: str = ""):
        super().__init__(message, details={"source": source} if source else None)
        self.source = source
