"""Pytest configuration and shared fixtures."""

import csv
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from tradelog_app.catalog.items import ItemCatalog
from tradelog_app.data.models import TradeRecord

CSV_HEADER = ["AuthorID", "Author", "Date", "Content", "Attachments", "Reactions"]


@pytest.fixture
def widget_catalog() -> ItemCatalog:
    """Small catalog with an overlapping pair to exercise match order."""
    return ItemCatalog([
        ("Golden Widget", [r"\bgolden\s+widgets?\b"]),
        ("Widget", [r"\bwidgets?\b", r"\bwdg\b"]),
        ("Gadget", [r"\bgadgets?\b"]),
    ])


@pytest.fixture
def make_record() -> Callable[..., TradeRecord]:
    """Factory for trade records with sensible defaults."""
    def _make(content: Optional[str] = "selling widget for 50",
              date: str = "2024-03-01T12:00:00+00:00",
              author: str = "trader",
              author_id: int = 1001) -> TradeRecord:
        return TradeRecord(author_id=author_id, author=author, date=date, content=content)
    return _make


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write rows (dicts keyed by column name) to a CSV export in tmp_path."""
    def _write(rows: list[dict[str, Any]], name: str = "tradexport.csv",
               header: Optional[list[str]] = None) -> Path:
        path = tmp_path / name
        columns = header or CSV_HEADER
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(columns)
            for row in rows:
                writer.writerow(["" if row.get(col) is None else row.get(col) for col in columns])
        return path
    return _write


@pytest.fixture
def scenario_rows() -> list[dict[str, Any]]:
    """Two priced widget posts and one row with a broken date."""
    return [
        {"AuthorID": 1, "Author": "alice", "Date": "2024-03-01T10:00:00+00:00",
         "Content": "selling Widget for 50"},
        {"AuthorID": 2, "Author": "bob", "Date": "2024-03-03T10:00:00+00:00",
         "Content": "wtb Widget $75"},
        {"AuthorID": 3, "Author": "carol", "Date": "yesterday at noon",
         "Content": "selling Widget for 60"},
    ]
