"""
Per-item aggregation of classified trades.

One TradeAggregator holds the state of exactly one analysis run: the running
ItemStats per item (in first-seen order) and every valid timestamp seen in the
file. Nothing is shared between runs.
"""

from datetime import datetime
from typing import Optional

import structlog

from .config.defaults import ReportParams, SpanParams
from .data.models import ClassifiedTrade, ItemStats
from .metrics.frequency import classify_frequency
from .metrics.price_stats import (
    PriceSummary,
    format_percentage,
    summarize_prices,
    trade_chances,
)
from .metrics.span import GlobalSpan, compute_global_span
from .models.report import EstimatedPrice, ItemAnalysis, SupplyDemand, TradeChance

logger = structlog.get_logger(__name__)


class TradeAggregator:
    """Accumulates classified trades and rolls them up into item analyses."""

    def __init__(self, span_params: Optional[SpanParams] = None,
                 report_params: Optional[ReportParams] = None) -> None:
        self.span_params = span_params or SpanParams()
        self.report_params = report_params or ReportParams()

        self.item_stats: dict[str, ItemStats] = {}
        self.all_trade_dates: list[datetime] = []

    def observe_timestamp(self, ts: datetime) -> None:
        """Record a valid message timestamp for the overall span."""
        self.all_trade_dates.append(ts)

    def add_trade(self, trade: ClassifiedTrade) -> None:
        """Route a classified trade to its item's statistics."""
        stats = self.item_stats.get(trade.item)
        if stats is None:
            stats = self.item_stats[trade.item] = ItemStats()
        stats.record(trade)

    def compute_span(self) -> GlobalSpan:
        return compute_global_span(self.all_trade_dates, self.span_params)

    def finalize(self, span: Optional[GlobalSpan] = None) -> list[ItemAnalysis]:
        """
        Summarise every item, highest median price first.

        Items without prices sort as if their median were 0. Ties keep the
        order in which items were first seen.

        Args:
            span: Overall span; computed from the observed timestamps if omitted

        Returns:
            Item analyses ranked by descending median price
        """
        if span is None:
            span = self.compute_span()

        summaries = {name: summarize_prices(stats.prices)
                     for name, stats in self.item_stats.items()}

        ranked = sorted(
            self.item_stats.items(),
            key=lambda entry: summaries[entry[0]].median or 0.0,
            reverse=True,
        )

        results = [
            self._analyze_item(name, stats, summaries[name], span)
            for name, stats in ranked
        ]

        logger.debug("Item data aggregation complete", items=len(results))
        return results

    def _analyze_item(self, name: str, stats: ItemStats, summary: PriceSummary,
                      span: GlobalSpan) -> ItemAnalysis:
        buy_chance, sell_chance = trade_chances(stats.supply_posts, stats.demand_posts)
        decimals = self.report_params.percent_decimals

        return ItemAnalysis(
            item=name,
            estimated_price=EstimatedPrice(
                median=summary.median,
                min=summary.min,
                max=summary.max,
            ),
            supply_demand=SupplyDemand(
                supply_posts=stats.supply_posts,
                demand_posts=stats.demand_posts,
            ),
            estimated_trade_chances=TradeChance(
                chance_to_buy=format_percentage(buy_chance, decimals),
                chance_to_sell=format_percentage(sell_chance, decimals),
            ),
            rough_selling_frequency=classify_frequency(
                stats.total_posts,
                span.total_days,
                days_per_month=self.span_params.days_per_month,
                decimals=self.report_params.rate_decimals,
            ),
        )
