"""
Logging configuration and utilities for the trade log analyzer.
"""
from .config import configure_logging, get_logger, log_skip_decision

__all__ = ["configure_logging", "get_logger", "log_skip_decision"]
