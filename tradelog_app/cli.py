"""Command-line entry point for the trade log analyzer."""

import argparse
import sys
from typing import Any, Optional

import structlog

from .catalog.items import ItemCatalog, load_catalog_file
from .config.loader import ConfigLoader
from .config.validation import SUPPORTED_FORMATS
from .engine import TradeAnalysisEngine
from .errors import SystemFailureError
from .logging.config import configure_logging
from .reporting.writer import write_report

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tradelog-analyze",
        description="Estimate item prices and trade activity from a chat trade log CSV export.",
    )
    parser.add_argument("csv_path", help="Trade log CSV export")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every skipped record and pipeline step")
    parser.add_argument("--config", dest="config_path",
                        help="YAML file overriding default parameters")
    parser.add_argument("--catalog", dest="catalog_path",
                        help="YAML item catalog replacing the built-in one")
    parser.add_argument("--format", dest="output_format", choices=SUPPORTED_FORMATS,
                        help="Report body format (default: yaml)")
    parser.add_argument("-o", "--output", dest="output_path",
                        help="Write the report to this file instead of stdout")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON lines")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the analyzer; returns the process exit code."""
    args = build_parser().parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else "WARNING",
        format_json=args.json_logs,
    )

    overrides: dict[str, Any] = {}
    if args.output_format:
        overrides["report"] = {"format": args.output_format}

    try:
        config = ConfigLoader.create(args.config_path).load(overrides)
        if args.catalog_path:
            catalog = load_catalog_file(args.catalog_path)
        else:
            catalog = ItemCatalog.builtin()

        engine = TradeAnalysisEngine(catalog=catalog, config=config)
        output = engine.run(args.csv_path)
        write_report(output, args.output_path)
    except SystemFailureError as e:
        logger.error("Trade analysis failed", error=str(e), error_type=type(e).__name__)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
