"""
Error classification system for the trade log analysis pipeline.

Data quality errors describe individual records that cannot be used and are
skipped; system failures describe setup or output problems that abort the run.
"""

from .data_quality import (
    DataQualityError,
    MalformedRowError,
    MissingContentError,
    UnparseableDateError,
    NoItemMatchError,
    NoValidPriceError,
)
from .system_failures import (
    SystemFailureError,
    InputFileError,
    CatalogCompileError,
    SerializationFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedRowError",
    "MissingContentError",
    "UnparseableDateError",
    "NoItemMatchError",
    "NoValidPriceError",
    # System Failures
    "SystemFailureError",
    "InputFileError",
    "CatalogCompileError",
    "SerializationFailureError",
    "ConfigurationError",
]
