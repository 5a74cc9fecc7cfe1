"""Report output to stdout or a file."""

import sys
from pathlib import Path
from typing import Optional, Union

import structlog

from ..errors import SerializationFailureError

logger = structlog.get_logger(__name__)


def write_report(text: str, output_path: Optional[Union[str, Path]] = None) -> None:
    """
    Write a rendered report.

    Args:
        text: Rendered report document
        output_path: Destination file; stdout when None. Parent
            directories are created as needed.

    Raises:
        SerializationFailureError: If the report could not be written
    """
    if output_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise SerializationFailureError(f"Could not write report to '{path}': {e}")

    logger.info("Report written", path=str(path), bytes=len(text.encode("utf-8")))
