"""
Message text parsers for converting free-form chat text into trade fields.

Each parser works on already lowercased text and raises a data quality error
when the text does not carry the field it is looking for.
"""

import math
import re
from datetime import datetime
from typing import Optional

from ..config.defaults import ClassifierParams
from ..errors import NoValidPriceError, UnparseableDateError
from ..utils.time import parse_rfc3339
from .models import Intent

_DEFAULTS = ClassifierParams()


class PriceParser:
    """Pulls the first numeric-shaped token out of a message."""

    def __init__(self, pattern: str = _DEFAULTS.price_pattern,
                 thousands_multiplier: float = _DEFAULTS.thousands_multiplier):
        self.pattern = re.compile(pattern, re.IGNORECASE)
        self.thousands_multiplier = thousands_multiplier

    def find_token(self, text: str) -> Optional[str]:
        """Return the first price-shaped substring, or None."""
        match = self.pattern.search(text)
        return match.group(0) if match else None

    def parse(self, text: str) -> float:
        """
        Extract a price from message text.

        The first match wins: "2k" is 2000.0, "$1,250" is 1250.0, and a stray
        number before the real price is taken as the price.

        Raises:
            NoValidPriceError: No token, or the token is not a number
        """
        token = self.find_token(text)
        if token is None:
            raise NoValidPriceError("No price token in message text")

        return self.parse_token(token)

    def parse_token(self, token: str) -> float:
        """Normalize and convert a single price token."""
        cleaned = token.replace("$", "").replace(",", "")

        multiplier = 1.0
        if cleaned[-1:] in ("k", "K"):
            cleaned = cleaned[:-1]
            multiplier = self.thousands_multiplier

        try:
            value = float(cleaned)
        except ValueError:
            raise NoValidPriceError(f"Unparseable price token '{token}'", price_token=token)

        if not math.isfinite(value) or value < 0:
            raise NoValidPriceError(f"Price token '{token}' is not a finite amount",
                                    price_token=token)

        return value * multiplier


class IntentParser:
    """Classifies a message as supply, demand or unknown."""

    def __init__(self, sell_pattern: str = _DEFAULTS.sell_pattern,
                 buy_pattern: str = _DEFAULTS.buy_pattern):
        self.sell_pattern = re.compile(sell_pattern, re.IGNORECASE)
        self.buy_pattern = re.compile(buy_pattern, re.IGNORECASE)

    def parse(self, text: str) -> Intent:
        # Sell wins when a message has both keywords
        if self.sell_pattern.search(text):
            return Intent.SUPPLY
        if self.buy_pattern.search(text):
            return Intent.DEMAND
        return Intent.UNKNOWN


def parse_trade_date(raw_date: Optional[str]) -> datetime:
    """
    Parse a record timestamp.

    Raises:
        UnparseableDateError: If the text is not RFC 3339 with an offset
    """
    parsed = parse_rfc3339(raw_date)
    if parsed is None:
        raise UnparseableDateError(f"Unparseable date format '{raw_date}'", raw_date=raw_date)
    return parsed


def extract_price(text: str) -> float:
    """Extract a price using the default price pattern."""
    return PriceParser().parse(text)


def classify_intent(text: str) -> Intent:
    """Classify intent using the default sell/buy keywords."""
    return IntentParser().parse(text)
