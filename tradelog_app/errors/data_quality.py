"""
Data quality error classifications for trade log records.

These exceptions describe why a single CSV row could not contribute to the
analysis. They are always recoverable: the row is skipped and the run goes on.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for record-level issues that are handled by skipping the row."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedRowError(DataQualityError):
    """CSV row could not be turned into a trade record."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 raw_data: Optional[dict] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.raw_data = raw_data


class MissingContentError(DataQualityError):
    """Record has no message text."""


class UnparseableDateError(DataQualityError):
    """Record timestamp is not a valid RFC 3339 date-time with offset."""

    def __init__(self, message: str, raw_date: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_date = raw_date


class NoItemMatchError(DataQualityError):
    """Message text does not mention any catalogued item."""


class NoValidPriceError(DataQualityError):
    """No usable price token was found in the message text."""

    def __init__(self, message: str, price_token: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.price_token = price_token
