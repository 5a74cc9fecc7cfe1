"""Rough trade frequency buckets"""

from typing import Optional

NOT_OBSERVED = "Infrequently/Not observed"


def classify_frequency(total_posts: int, elapsed_days: float,
                       days_per_month: float = 30.44,
                       decimals: int = 2) -> str:
    """
    Describe how often an item is posted.

    The rate is measured against the whole dataset's elapsed days, not the
    item's own first-to-last span.

    Args:
        total_posts: Supply plus demand posts for the item
        elapsed_days: Whole days covered by the dataset
        days_per_month: Month approximation for the per-month bucket
        decimals: Decimal places for the rate

    Returns:
        "N times/day", "N times/week", "N times/month", "Once every N days",
        or NOT_OBSERVED when there are no posts or no elapsed days
    """
    rate = posts_per_day(total_posts, elapsed_days)
    if rate is None:
        return NOT_OBSERVED

    if rate >= 1.0:
        return f"{rate:.{decimals}f} times/day"
    if rate * 7.0 >= 1.0:
        return f"{rate * 7.0:.{decimals}f} times/week"
    if rate * days_per_month >= 1.0:
        return f"{rate * days_per_month:.{decimals}f} times/month"
    return f"Once every {1.0 / rate:.0f} days"


def posts_per_day(total_posts: int, elapsed_days: float) -> Optional[float]:
    if total_posts <= 0 or elapsed_days <= 0:
        return None
    return total_posts / elapsed_days
