"""Tests for the codec module."""

import io
import pytest
import tempfile
from pathlib import Path

from transdict.codec import parse, decode, encode, read_file, write_file
from transdict.schema import Dictionary


class TestDecode:
    """Tests for parse and decode."""

    def test_parse_line_numbers(self, sample_dictionary_content):
        """Test parse yields entries with their line numbers."""
        entries = list(parse(io.StringIO(sample_dictionary_content)))
        assert entries == [
            ("cat", ["кот", "кошка"], 1),
            ("dog", ["пёс"], 2),
            ("house", ["дом"], 4),
        ]

    def test_decode(self, sample_dictionary_content):
        """Test decoding skips blank lines and words without translations."""
        d = decode(io.StringIO(sample_dictionary_content))
        assert d.entries == {
            "cat": {"кот", "кошка"},
            "dog": {"пёс"},
            "house": {"дом"},
        }
        assert "lonely" not in d

    def test_decode_tabs_and_duplicates(self):
        """Test any whitespace run separates fields and duplicates collapse."""
        d = decode(io.StringIO("cat\tкот  кот\r\n"))
        assert d.translations("cat") == {"кот"}

    def test_decode_empty(self):
        """Test empty input gives an empty dictionary."""
        assert decode(io.StringIO("")).count() == 0
        assert decode(io.StringIO("\n\nword\n")).count() == 0


class TestEncode:
    """Tests for encode."""

    def test_encode_sorted(self):
        """Test output is sorted by word and translation."""
        d = Dictionary({"dog": {"собака", "пёс"}, "cat": {"кот"}})
        out = io.StringIO()
        encode(d, out)
        assert out.getvalue() == "cat кот\ndog пёс собака\n"

    def test_encode_empty(self):
        """Test empty dictionary writes nothing."""
        out = io.StringIO()
        encode(Dictionary(), out)
        assert out.getvalue() == ""


class TestFiles:
    """Tests for read_file and write_file."""

    def test_write_then_read(self, animals):
        """Test a file written by write_file reads back identically."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "animals.txt")
            write_file(animals, filepath)
            assert read_file(filepath).entries == animals.entries

    def test_write_unencodable_leaves_file(self, animals):
        """Test an encoding failure happens before the file is truncated."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "animals.txt")
            filepath.write_text("old entry\n", encoding="ascii")
            with pytest.raises(UnicodeEncodeError):
                write_file(animals, filepath, encoding="ascii")
            assert filepath.read_text(encoding="ascii") == "old entry\n"

    def test_read_missing_file(self):
        """Test reading a missing file raises OSError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OSError):
                read_file(Path(tmpdir, "missing.txt"))

    def test_read_invalid_utf8(self):
        """Test undecodable bytes raise UnicodeDecodeError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "bad.txt")
            filepath.write_bytes(b"cat \xff\xfe\n")
            with pytest.raises(UnicodeDecodeError):
                read_file(filepath)
