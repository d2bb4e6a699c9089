"""Tests for solplot.loader and solplot.source modules."""

import io
from pathlib import Path

import pytest

from solplot.errors import FloatParseError, InputOutputError, UnknownStatusError
from solplot.loader import load_status_file, parse_log
from solplot.source import STDIN_NAME, InputSource
from solplot.status import Status, StatusValue

SAMPLE_LOG = """0.76,0
        0.56,1
        0.12,
        0.56,2
        0.12,2
        0.7678,0
        0.80,"""


class TestParseLog:
    """Tests for parse_log function."""

    def test_sample_log(self) -> None:
        """Test parsing an indented log with every status."""
        assert parse_log(SAMPLE_LOG) == [
            StatusValue(Status.LINEAR, 0.76),
            StatusValue(Status.INTEGER, 0.56),
            StatusValue(Status.INFEASIBLE, 0.12),
            StatusValue(Status.TIMEOUT, 0.56),
            StatusValue(Status.TIMEOUT, 0.12),
            StatusValue(Status.LINEAR, 0.7678),
            StatusValue(Status.INFEASIBLE, 0.8),
        ]

    def test_empty_text_is_empty_list(self) -> None:
        assert parse_log("") == []

    def test_trailing_newline_adds_no_record(self) -> None:
        assert parse_log("1.0,0\n2.0,1\n") == [
            StatusValue(Status.LINEAR, 1.0),
            StatusValue(Status.INTEGER, 2.0),
        ]

    def test_crlf_line_endings(self) -> None:
        assert parse_log("1.0,0\r\n2.0,\r\n") == [
            StatusValue(Status.LINEAR, 1.0),
            StatusValue(Status.INFEASIBLE, 2.0),
        ]

    def test_length_and_order_preserved(self) -> None:
        """Test that output index i comes from input line i."""
        values = [float(i) / 7 for i in range(50)]
        text = "\n".join(f"{v},{i % 3}" for i, v in enumerate(values))

        records = parse_log(text)

        assert len(records) == len(values)
        assert [r.value for r in records] == values
        assert [r.status.code for r in records] == [i % 3 for i in range(50)]

    def test_unknown_status_aborts(self) -> None:
        with pytest.raises(UnknownStatusError) as exc_info:
            parse_log("1.0,5")
        assert exc_info.value.code == 5

    def test_first_error_wins_with_line_number(self) -> None:
        """Test that the first bad line is reported with its position."""
        with pytest.raises(FloatParseError) as exc_info:
            parse_log("1.0,0\n2.0,1\nabc,0\n3.0,9")

        err = exc_info.value
        assert err.line_number == 3
        assert err.column == 0
        assert "line 3" in str(err)

    def test_blank_line_in_middle_fails(self) -> None:
        with pytest.raises(FloatParseError) as exc_info:
            parse_log("1.0,0\n\n2.0,1")
        assert exc_info.value.line_number == 2


class TestInputSource:
    """Tests for InputSource."""

    def test_from_arg_none_is_stdin(self) -> None:
        source = InputSource.from_arg(None)
        assert source.is_stdin
        assert source.describe() == STDIN_NAME

    def test_from_arg_dash_is_stdin(self) -> None:
        assert InputSource.from_arg("-").is_stdin

    def test_from_arg_path(self) -> None:
        source = InputSource.from_arg("logs/ratio.csv")
        assert source.path == Path("logs/ratio.csv")
        assert source.describe() == str(Path("logs/ratio.csv"))

    def test_read_text_from_stream(self) -> None:
        assert InputSource().read_text(io.BytesIO(b"1.0,0\n")) == "1.0,0\n"

    def test_undecodable_stdin_raises_io_error(self) -> None:
        """Test that stdin is decoded as strict UTF-8 like a file."""
        with pytest.raises(InputOutputError) as exc_info:
            InputSource().read_text(io.BytesIO(b"\xff\xfe,0\n"))
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert STDIN_NAME in str(exc_info.value)

    def test_stdin_ignores_text_layer_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the raw stdin bytes are decoded, not the locale text layer."""
        data = "0.5,1\n".encode("utf-8")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-16"))
        assert InputSource().read_text() == "0.5,1\n"

    def test_missing_file_raises_io_error(self, tmp_path: Path) -> None:
        source = InputSource(tmp_path / "missing.csv")
        with pytest.raises(InputOutputError) as exc_info:
            source.read_text()
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert "missing.csv" in str(exc_info.value)

    def test_undecodable_file_raises_io_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.csv"
        path.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(InputOutputError):
            InputSource(path).read_text()


class TestLoadStatusFile:
    """Tests for load_status_file function."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "log.csv"
        path.write_text("0.5,0\n0.25,\n")

        assert load_status_file(InputSource(path)) == [
            StatusValue(Status.LINEAR, 0.5),
            StatusValue(Status.INFEASIBLE, 0.25),
        ]

    def test_loads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"2.0,2\n")))
        assert load_status_file(InputSource()) == [StatusValue(Status.TIMEOUT, 2.0)]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert load_status_file(InputSource(path)) == []
