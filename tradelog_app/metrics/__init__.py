"""Statistics used by the per-item rollup and the overall data span"""

from .frequency import NOT_OBSERVED, classify_frequency
from .price_stats import PriceSummary, calculate_median, summarize_prices, trade_chances
from .span import GlobalSpan, compute_global_span, describe_period

__all__ = [
    "GlobalSpan",
    "NOT_OBSERVED",
    "PriceSummary",
    "calculate_median",
    "classify_frequency",
    "compute_global_span",
    "describe_period",
    "summarize_prices",
    "trade_chances",
]
