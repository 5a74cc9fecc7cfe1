"""
CSV reader for trade log exports.

The export has a header row with the columns ``AuthorID``, ``Author``,
``Date``, ``Content``, ``Attachments`` and ``Reactions``. Columns are looked
up by name, so their order does not matter. Empty optional fields become None.
"""

import csv
import io
from pathlib import Path
from typing import Iterator, Optional, Union

import structlog

from ..errors import InputFileError, MalformedRowError
from .models import LoadedRow, TradeRecord

logger = structlog.get_logger(__name__)

REQUIRED_COLUMNS = ("AuthorID", "Author", "Date")
OPTIONAL_COLUMNS = ("Content", "Attachments", "Reactions")


def read_input_text(path: Union[str, Path]) -> str:
    """
    Read the whole input file.

    Raises:
        InputFileError: If the file cannot be opened or decoded
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Could not open file '{file_path}': {e}", path=str(file_path))


def parse_row(header: list[str], row: list[str], line_number: int) -> TradeRecord:
    """
    Convert one CSV row into a TradeRecord.

    Raises:
        MalformedRowError: Wrong field count, missing columns or a bad AuthorID
    """
    if len(row) != len(header):
        raise MalformedRowError(
            f"found record with {len(row)} fields, but the header has {len(header)} fields",
            line_number=line_number,
        )

    values = dict(zip(header, row))

    missing = [name for name in REQUIRED_COLUMNS if name not in values]
    if missing:
        raise MalformedRowError(
            f"missing field(s): {', '.join(missing)}",
            line_number=line_number,
            raw_data=values,
        )

    raw_author_id = values["AuthorID"]
    try:
        author_id = int(raw_author_id)
    except ValueError as e:
        raise MalformedRowError(
            f"field 'AuthorID': invalid integer '{raw_author_id}'",
            line_number=line_number,
            raw_data=values,
        ) from e
    if author_id < 0:
        raise MalformedRowError(
            f"field 'AuthorID': negative value '{raw_author_id}'",
            line_number=line_number,
            raw_data=values,
        )

    optional: dict[str, Optional[str]] = {
        name: values.get(name) or None for name in OPTIONAL_COLUMNS
    }

    return TradeRecord(
        author_id=author_id,
        author=values["Author"],
        date=values["Date"],
        content=optional["Content"],
        attachments=optional["Attachments"],
        reactions=optional["Reactions"],
    )


def iter_rows(text: str) -> Iterator[LoadedRow]:
    """
    Yield one LoadedRow per CSV record in ``text``.

    Malformed rows are yielded with an error message instead of a record.
    Line numbers count the header as line 1.
    """
    reader = csv.reader(io.StringIO(text))

    try:
        header = next(reader)
    except StopIteration:
        return
    except csv.Error as e:
        raise InputFileError(f"Could not read CSV header: {e}")

    header = [name.strip() for name in header]
    index = 0

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            yield LoadedRow(line_number=index + 2, error=str(e))
            index += 1
            continue

        # Blank line, not a record
        if not row:
            continue

        line_number = index + 2
        index += 1

        try:
            record = parse_row(header, row, line_number)
        except MalformedRowError as e:
            yield LoadedRow(line_number=line_number, error=str(e))
            continue

        yield LoadedRow(line_number=line_number, record=record)


def load_trade_records(path: Union[str, Path]) -> list[LoadedRow]:
    """
    Read a trade log export into memory.

    Args:
        path: CSV file path

    Returns:
        All rows in file order, malformed ones included

    Raises:
        InputFileError: If the file cannot be opened or decoded
    """
    logger.debug("Opening trade log", path=str(path))
    text = read_input_text(path)
    rows = list(iter_rows(text))
    logger.debug("Trade log loaded", path=str(path), rows=len(rows))
    return rows

