"""Report rendering and output."""

from .formatter import render_report
from .writer import write_report

__all__ = ["render_report", "write_report"]
