"""Price distribution and trade chance calculations"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class PriceSummary:
    """Median/min/max of an item's observed prices, None when there are none."""
    median: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None


def calculate_median(sorted_prices: list[float]) -> Optional[float]:
    """
    Median of an ascending list.

    Even-length lists use the mean of the two middle values.

    Returns:
        Median, or None for an empty list
    """
    if not sorted_prices:
        return None

    mid = len(sorted_prices) // 2
    if len(sorted_prices) % 2 == 0:
        return (sorted_prices[mid - 1] + sorted_prices[mid]) / 2.0
    return sorted_prices[mid]


def summarize_prices(prices: Iterable[float]) -> PriceSummary:
    """Sort prices and summarise them."""
    ordered = sorted(prices)
    if not ordered:
        return PriceSummary()

    return PriceSummary(
        median=calculate_median(ordered),
        min=ordered[0],
        max=ordered[-1],
    )


def trade_chances(supply_posts: int, demand_posts: int) -> tuple[float, float]:
    """
    Chance to buy and chance to sell, as percentages of decided posts.

    buy = demand / total, sell = supply / total. Posts with no buy/sell
    keyword are not part of ``total``.

    Returns:
        (buy_chance, sell_chance), each in [0, 100]
    """
    total = supply_posts + demand_posts

    buy_chance = demand_posts / total * 100.0 if total > 0 and demand_posts > 0 else 0.0
    sell_chance = supply_posts / total * 100.0 if total > 0 and supply_posts > 0 else 0.0

    return buy_chance, sell_chance


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"
