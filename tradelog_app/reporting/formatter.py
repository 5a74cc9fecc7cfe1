"""
Text rendering of an analysis report.

The document is a block of ``#`` comment lines with run metadata followed by
the report body as YAML (default) or JSON. Both body formats are readable by
people and by machines; the comment header is ignored by YAML parsers.
"""

import json
from typing import Optional

import yaml

from ..config.defaults import ReportParams
from ..errors import SerializationFailureError
from ..models.report import AnalysisReport

NOT_AVAILABLE = "N/A"


def format_metadata_header(report: AnalysisReport, span_decimals: int = 2) -> str:
    """Comment block with span and run metadata."""
    span = report.span
    earliest = span.earliest_epoch
    latest = span.latest_epoch
    d = span_decimals

    lines = [
        "# Trade Analysis Metadata",
        "# ------------------------",
        f"# Earliest message (UTC Epoch): {earliest if earliest is not None else NOT_AVAILABLE}",
        f"# Latest message (UTC Epoch): {latest if latest is not None else NOT_AVAILABLE}",
        f"# Parser run time (UTC Epoch): {report.run_epoch}",
        f"# CSV data time period: {span.display_period}",
        f"# Total parsing and processing time: {report.total_parsing_time_ms} ms",
        f"# Overall trade data span: {span.total_days:.{d}f} days "
        f"({span.total_weeks:.{d}f} weeks, {span.total_months:.{d}f} months)",
    ]
    return "\n".join(lines) + "\n\n"


def render_body(report: AnalysisReport, fmt: str = "yaml") -> str:
    """
    Serialize the report body.

    Raises:
        SerializationFailureError: Unknown format or the serializer failed
    """
    body = report.to_dict()

    try:
        if fmt == "yaml":
            return yaml.safe_dump(
                body,
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            )
        if fmt == "json":
            return json.dumps(body, indent=2, ensure_ascii=False) + "\n"
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise SerializationFailureError(
            f"Failed to serialize report as {fmt}: {e}", output_format=fmt
        )

    raise SerializationFailureError(f"Unsupported output format: {fmt}", output_format=fmt)


def render_report(report: AnalysisReport, params: Optional[ReportParams] = None) -> str:
    """Full output document: metadata header followed by the body."""
    params = params or ReportParams()
    return format_metadata_header(report, params.span_decimals) + render_body(report, params.format)
