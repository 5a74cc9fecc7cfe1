"""Unit tests for the CSV trade log loader."""

import pytest
from pathlib import Path

from tradelog_app.data.loader import iter_rows, load_trade_records, parse_row
from tradelog_app.errors import InputFileError, MalformedRowError


class TestParseRow:
    """Test conversion of single CSV rows."""

    HEADER = ["AuthorID", "Author", "Date", "Content", "Attachments", "Reactions"]

    def test_full_row(self):
        record = parse_row(self.HEADER, ["42", "alice", "2024-03-01T10:00:00Z",
                                         "wts widget 5", "img.png", "👍 (2)"], 2)
        assert record.author_id == 42
        assert record.author == "alice"
        assert record.content == "wts widget 5"
        assert record.attachments == "img.png"
        assert record.reactions == "👍 (2)"

    def test_empty_optional_fields_are_none(self):
        record = parse_row(self.HEADER, ["42", "alice", "2024-03-01T10:00:00Z", "", "", ""], 2)
        assert record.content is None
        assert record.attachments is None
        assert record.reactions is None

    def test_columns_addressed_by_name(self):
        header = ["Content", "Date", "Author", "AuthorID"]
        record = parse_row(header, ["wtb widget 3", "2024-03-01T10:00:00Z", "bob", "7"], 2)
        assert record.author_id == 7
        assert record.content == "wtb widget 3"
        assert record.reactions is None

    def test_field_count_mismatch(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(self.HEADER, ["42", "alice"], 5)
        assert exc_info.value.line_number == 5

    def test_bad_author_id(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(self.HEADER, ["abc", "alice", "2024-03-01T10:00:00Z", "x", "", ""], 2)
        assert exc_info.value.line_number == 2
        assert "invalid integer" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_negative_author_id(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(self.HEADER, ["-1", "alice", "2024-03-01T10:00:00Z", "x", "", ""], 2)
        assert "negative value" in str(exc_info.value)

    def test_missing_required_column(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(["Author", "Date", "Content"], ["alice", "2024-03-01T10:00:00Z", "x"], 2)
        assert "AuthorID" in str(exc_info.value)


class TestIterRows:
    """Test reading CSV text."""

    def test_line_numbers_and_errors(self):
        text = (
            "AuthorID,Author,Date,Content,Attachments,Reactions\n"
            "1,alice,2024-03-01T10:00:00Z,wts widget 5,,\n"
            "oops,bob,2024-03-01T11:00:00Z,wtb widget 4,,\n"
            "\n"
            "3,carol,2024-03-01T12:00:00Z,\"multi\nline widget 9\",,\n"
        )
        rows = list(iter_rows(text))

        assert [row.line_number for row in rows] == [2, 3, 4]
        assert rows[0].ok
        assert not rows[1].ok
        assert "AuthorID" in rows[1].error
        assert rows[2].record.content == "multi\nline widget 9"

    def test_header_only(self):
        assert list(iter_rows("AuthorID,Author,Date,Content,Attachments,Reactions\n")) == []

    def test_empty_text(self):
        assert list(iter_rows("")) == []


class TestLoadTradeRecords:
    """Test reading trade log files."""

    def test_loads_file(self, write_csv, scenario_rows):
        rows = load_trade_records(write_csv(scenario_rows))
        assert len(rows) == 3
        assert all(row.ok for row in rows)

    def test_utf8_bom(self, tmp_path: Path):
        path = tmp_path / "bom.csv"
        path.write_bytes(
            "\ufeffAuthorID,Author,Date,Content,Attachments,Reactions\n"
            "1,alice,2024-03-01T10:00:00Z,wts widget 5,,\n".encode("utf-8")
        )
        rows = load_trade_records(path)
        assert rows[0].record.author_id == 1

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(InputFileError) as exc_info:
            load_trade_records(tmp_path / "nope.csv")
        assert exc_info.value.path.endswith("nope.csv")
        assert exc_info.value.recoverable is False

    def test_undecodable_file(self, tmp_path: Path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"AuthorID,Author\n1,\xe9\xff\xfe\n")
        with pytest.raises(InputFileError):
            load_trade_records(path)
