"""Default configuration parameters for the trade log analysis pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassifierParams:
    """Record classification parameters."""
    # First match in the lowercased text wins
    price_pattern: str = r"\$?\d[\d,.]*k?"
    thousands_multiplier: float = 1000.0            # Value of a trailing "k"

    # Intent keywords, sell is checked before buy
    sell_pattern: str = r"\b(sell|selling|wts)\b"
    buy_pattern: str = r"\b(buy|buying|wtb)\b"


@dataclass(frozen=True)
class SpanParams:
    """Data span and frequency bucketing parameters."""
    days_per_month: float = 30.44                   # Fixed month approximation
    display_month_days: int = 30                    # Month size in "M months, D days"


@dataclass(frozen=True)
class ReportParams:
    """Report rendering parameters."""
    format: str = "yaml"                            # yaml or json
    percent_decimals: int = 2
    rate_decimals: int = 2
    span_decimals: int = 2


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    classifier: ClassifierParams
    span: SpanParams
    report: ReportParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        classifier=ClassifierParams(),
        span=SpanParams(),
        report=ReportParams(),
    )
