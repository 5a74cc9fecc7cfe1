"""
Overall data span of a trade log.

The span runs from the earliest to the latest valid message timestamp in the
whole file, including messages that were later dropped for having no item or
price. Days and weeks are whole units; months use a fixed 30.44-day
approximation rather than calendar months.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..config.defaults import SpanParams
from ..utils.time import to_epoch_seconds

NO_DATA = "No data available"
LESS_THAN_A_DAY = "Less than a day (or only one record)"
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class GlobalSpan:
    """Elapsed time covered by the dataset."""
    earliest: Optional[datetime]
    latest: Optional[datetime]
    duration: timedelta
    total_days: float          # Whole days
    total_weeks: float         # Whole weeks
    total_months: float        # total_days / days_per_month
    display_period: str
    timestamp_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.timestamp_count > 0

    @property
    def earliest_epoch(self) -> Optional[int]:
        return to_epoch_seconds(self.earliest) if self.earliest is not None else None

    @property
    def latest_epoch(self) -> Optional[int]:
        return to_epoch_seconds(self.latest) if self.latest is not None else None


def describe_period(timestamp_count: int, duration: timedelta,
                    params: Optional[SpanParams] = None) -> str:
    """
    Human-readable span, checked in priority order.

    no data, zero seconds, at least a month, at least a week, else days.
    """
    params = params or SpanParams()

    if timestamp_count == 0:
        return NO_DATA

    if duration.total_seconds() == 0:
        return LESS_THAN_A_DAY

    days = duration.days
    total_months = days / params.days_per_month

    if total_months >= 1.0:
        months, remaining = divmod(days, params.display_month_days)
        return f"{months} months, {remaining} days"

    if days // DAYS_PER_WEEK >= 1:
        weeks, remaining = divmod(days, DAYS_PER_WEEK)
        return f"{weeks} weeks, {remaining} days"

    return f"{days} days"


def compute_global_span(timestamps: Iterable[datetime],
                        params: Optional[SpanParams] = None) -> GlobalSpan:
    """
    Compute the overall span of a set of timestamps.

    Args:
        timestamps: Every valid message timestamp seen in the run
        params: Span parameters

    Returns:
        GlobalSpan; zero duration when fewer than two timestamps exist
    """
    params = params or SpanParams()
    ordered = sorted(timestamps)

    earliest = ordered[0] if ordered else None
    latest = ordered[-1] if ordered else None

    if len(ordered) > 1:
        duration = ordered[-1] - ordered[0]
    else:
        duration = timedelta(0)

    total_days = float(duration.days)
    total_weeks = float(duration.days // DAYS_PER_WEEK)
    total_months = total_days / params.days_per_month

    return GlobalSpan(
        earliest=earliest,
        latest=latest,
        duration=duration,
        total_days=total_days,
        total_weeks=total_weeks,
        total_months=total_months,
        display_period=describe_period(len(ordered), duration, params),
        timestamp_count=len(ordered),
    )
