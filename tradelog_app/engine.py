"""
Main analysis engine coordinator.

Orchestrates the trade log analysis pipeline:
CSV rows -> Classification -> Aggregation -> Report
"""

import time
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Union

import structlog

from .aggregator import TradeAggregator
from .catalog.items import ItemCatalog
from .classifier import TradeClassifier
from .config.defaults import DefaultConfig, get_default_config
from .data.loader import load_trade_records
from .data.models import LoadedRow, SkipReason
from .models.report import AnalysisReport
from .reporting.formatter import render_report
from .utils.time import elapsed_ms, utc_now_epoch

logger = structlog.get_logger(__name__)


class TradeAnalysisEngine:
    """
    Main coordinator for one or more independent analysis runs.

    The engine holds only read-only collaborators (catalog, configuration,
    compiled parsers). Each run builds its own aggregator, so the same engine
    can analyze several files in one process.
    """

    def __init__(self, catalog: Optional[ItemCatalog] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        self.config = config or get_default_config()
        self.catalog = catalog if catalog is not None else ItemCatalog.builtin()
        self.classifier = TradeClassifier(self.catalog, self.config.classifier)

        logger.debug("Item keywords loaded", items=len(self.catalog))

    def analyze_file(self, path: Union[str, Path]) -> AnalysisReport:
        """
        Analyze a trade log CSV file.

        Raises:
            InputFileError: If the file cannot be read
        """
        start = time.perf_counter()
        logger.info("Starting trade analysis", path=str(path))

        rows = load_trade_records(path)
        return self.analyze_rows(rows, start=start)

    def analyze_rows(self, rows: Iterable[LoadedRow],
                     start: Optional[float] = None) -> AnalysisReport:
        """
        Classify and aggregate already loaded rows.

        Args:
            rows: Loaded CSV rows, malformed ones included
            start: perf_counter reading the processing time is measured from

        Returns:
            Complete analysis report
        """
        if start is None:
            start = time.perf_counter()

        aggregator = TradeAggregator(self.config.span, self.config.report)
        skip_reasons: Counter = Counter()
        processed = 0

        for row in rows:
            if row.record is None:
                logger.warning(
                    "Skipping malformed record",
                    line_number=row.line_number,
                    error=row.error,
                )
                skip_reasons[SkipReason.MALFORMED_ROW.value] += 1
                continue

            processed += 1
            result = self.classifier.classify(row.record, row.line_number)

            if result.timestamp is not None:
                aggregator.observe_timestamp(result.timestamp)

            if result.trade is None:
                skip_reasons[result.skipped_reason.value] += 1
                continue

            aggregator.add_trade(result.trade)

        skipped = sum(skip_reasons.values())
        logger.info(
            "Finished processing records",
            processed=processed,
            skipped=skipped,
            skip_reasons=dict(skip_reasons),
        )

        processing_ms = elapsed_ms(start)

        span = aggregator.compute_span()
        if not span.has_data:
            logger.warning(
                "No valid trade data found after parsing, output will contain no item analysis"
            )

        items = aggregator.finalize(span)

        return AnalysisReport(
            span=span,
            items=items,
            run_epoch=utc_now_epoch(),
            total_parsing_time_ms=processing_ms,
            processed_records=processed,
            skipped_records=skipped,
            skip_reasons=dict(skip_reasons),
        )

    def render(self, report: AnalysisReport) -> str:
        """Render a report with the configured output format."""
        return render_report(report, self.config.report)

    def run(self, path: Union[str, Path]) -> str:
        """Analyze a file and return the rendered report document."""
        report = self.analyze_file(path)
        output = self.render(report)
        logger.info("Trade analysis complete", items=len(report.items))
        return output
