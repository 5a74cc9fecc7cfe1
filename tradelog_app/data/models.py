"""
Canonical data models for trade log records.

Raw rows and classified trades are immutable; per-item statistics are the only
mutable structure and belong to the aggregator for the duration of one run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Intent(str, Enum):
    """Whether a message offers an item, asks for one, or neither."""
    SUPPLY = "supply"
    DEMAND = "demand"
    UNKNOWN = "unknown"


class SkipReason(str, Enum):
    """Why a row did not produce a classified trade."""
    MALFORMED_ROW = "malformed_row"
    MISSING_CONTENT = "missing_content"
    UNPARSEABLE_DATE = "unparseable_date"
    NO_ITEM_MATCH = "no_item_match"
    NO_VALID_PRICE = "no_valid_price"


@dataclass(frozen=True)
class TradeRecord:
    """One row of the trade log export."""
    author_id: int
    author: str
    date: str                          # Raw RFC 3339 text
    content: Optional[str] = None
    attachments: Optional[str] = None
    reactions: Optional[str] = None


@dataclass(frozen=True)
class ClassifiedTrade:
    """A record that named an item and a price."""
    item: str
    price: float                       # Non-negative
    intent: Intent
    timestamp: datetime                # Timezone-aware


@dataclass(frozen=True)
class LoadedRow:
    """Result of reading one CSV row."""
    line_number: int
    record: Optional[TradeRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying one trade record."""

    trade: Optional[ClassifiedTrade] = None

    # Parsed message timestamp, kept even when a later step drops the record
    timestamp: Optional[datetime] = None

    skipped_reason: Optional[SkipReason] = None
    detail: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.trade is not None

    @classmethod
    def classified(cls, trade: ClassifiedTrade):
        """Create successful result."""
        return cls(trade=trade, timestamp=trade.timestamp)

    @classmethod
    def skipped(cls, reason: SkipReason, detail: Optional[str] = None,
                timestamp: Optional[datetime] = None):
        """Create skipped result."""
        return cls(skipped_reason=reason, detail=detail, timestamp=timestamp)


@dataclass
class ItemStats:
    """Running statistics for one item."""
    prices: list[float] = field(default_factory=list)
    supply_posts: int = 0
    demand_posts: int = 0
    trade_dates: list[datetime] = field(default_factory=list)

    def record(self, trade: ClassifiedTrade) -> None:
        """Add one classified trade."""
        self.prices.append(trade.price)
        self.trade_dates.append(trade.timestamp)

        if trade.intent is Intent.SUPPLY:
            self.supply_posts += 1
        elif trade.intent is Intent.DEMAND:
            self.demand_posts += 1

    @property
    def total_posts(self) -> int:
        """Posts with a decided intent."""
        return self.supply_posts + self.demand_posts
