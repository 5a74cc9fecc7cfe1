"""
Centralized logging configuration for the trade log analyzer.

This module provides standardized logging configuration using structlog
for all components. Log output goes to stderr so that a report printed on
stdout can be piped into other tools untouched.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        stream: Destination stream, stderr by default
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Route standard library logging to the chosen stream
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_skip_decision(
    logger: FilteringBoundLogger,
    line_number: int,
    author: str,
    reason: str,
    detail: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log why a record was dropped from the analysis.

    Skips are expected in chat data, so they are logged at DEBUG and only
    show up in verbose mode.

    Args:
        logger: Structlog logger instance
        line_number: CSV line of the record (header is line 1)
        author: Author name of the record
        reason: Skip reason code
        detail: Human-readable detail
        context: Additional context data
    """
    bound_logger = logger.bind(
        subsystem="classifier",
        line_number=line_number,
        author=author,
        reason=reason,
    )

    if detail:
        bound_logger = bound_logger.bind(detail=detail)
    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Skipping record")
