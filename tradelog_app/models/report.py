"""Data models for the analysis report"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..metrics.span import GlobalSpan


@dataclass(frozen=True)
class EstimatedPrice:
    median: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class SupplyDemand:
    supply_posts: int = 0
    demand_posts: int = 0


@dataclass(frozen=True)
class TradeChance:
    """Formatted percentages, e.g. "66.67%"."""
    chance_to_buy: str
    chance_to_sell: str


@dataclass(frozen=True)
class ItemAnalysis:
    """Finalized statistics for one item"""
    item: str
    estimated_price: EstimatedPrice
    supply_demand: SupplyDemand
    estimated_trade_chances: TradeChance
    rough_selling_frequency: str

    def to_dict(self) -> dict[str, Any]:
        """Nested dict in report field order"""
        return {
            "item": self.item,
            "estimated_price": {
                "median": self.estimated_price.median,
                "min": self.estimated_price.min,
                "max": self.estimated_price.max,
            },
            "supply_demand": {
                "supply_posts": self.supply_demand.supply_posts,
                "demand_posts": self.supply_demand.demand_posts,
            },
            "estimated_trade_chances": {
                "chance_to_buy": self.estimated_trade_chances.chance_to_buy,
                "chance_to_sell": self.estimated_trade_chances.chance_to_sell,
            },
            "rough_selling_frequency": self.rough_selling_frequency,
        }


@dataclass
class AnalysisReport:
    """Everything one analysis run produces"""
    span: GlobalSpan
    items: list[ItemAnalysis]
    run_epoch: int
    total_parsing_time_ms: int = 0

    # Record accounting
    processed_records: int = 0
    skipped_records: int = 0
    skip_reasons: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Report body, without the metadata header"""
        return {
            "total_parsing_time_ms": self.total_parsing_time_ms,
            "overall_trade_data_span_days": self.span.total_days,
            "overall_trade_data_span_weeks": self.span.total_weeks,
            "overall_trade_data_span_months": self.span.total_months,
            "items": [item.to_dict() for item in self.items],
        }
