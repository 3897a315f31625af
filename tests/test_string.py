"""Tests for osu! strings."""

import pytest

from osubuffer.codecs.string import read_osu_string
from osubuffer.codecs.string import read_string
from osubuffer.codecs.string import write_osu_string
from osubuffer.codecs.string import write_string
from osubuffer.constants.string_tag import StringTag
from osubuffer.objects.cursor import BufferUnderflow
from osubuffer.objects.cursor import ByteCursor


class TestWrite:
    """Tests for the byte layout."""

    def test_absent_when_nullable(self, cursor):
        """None or empty with nullable writes a lone zero tag."""
        write_osu_string(cursor, None, nullable=True)
        write_osu_string(cursor, "", nullable=True)
        assert cursor.getvalue() == b"\x00\x00"

    def test_empty_when_not_nullable(self, cursor):
        """Empty without nullable is a present string of length zero."""
        write_osu_string(cursor, "")
        assert cursor.getvalue() == b"\x0b\x00"

    def test_none_when_not_nullable(self, cursor):
        write_osu_string(cursor, None)
        assert cursor.getvalue() == b"\x0b\x00"

    def test_present(self, cursor):
        write_osu_string(cursor, "peppy")
        assert cursor.getvalue() == b"\x0b\x05peppy"

    def test_nullable_ignored_when_present(self, cursor):
        write_osu_string(cursor, "a", nullable=True)
        assert cursor.getvalue() == b"\x0b\x01a"

    def test_long_length_prefix(self, cursor):
        """Lengths past 127 use a multi-byte uleb128 prefix."""
        write_osu_string(cursor, "x" * 200)
        data = cursor.getvalue()
        assert data[:3] == b"\x0b\xc8\x01"
        assert len(data) == 203

    def test_single_byte_characters(self, cursor):
        """Each character is one byte."""
        write_osu_string(cursor, "caf\xe9")
        assert cursor.getvalue() == b"\x0b\x04caf\xe9"

    def test_multi_byte_characters_rejected(self, cursor):
        with pytest.raises(UnicodeEncodeError):
            write_osu_string(cursor, "日本")
        assert cursor.length == 0


class TestRead:
    """Tests for reading strings back."""

    @pytest.mark.parametrize(
        "value, nullable, expected",
        [
            (None, True, None),
            ("", True, None),
            ("", False, ""),
            ("a8d3f2e1c0b9a7f6e5d4c3b2a1f0e9d8", False, "a8d3f2e1c0b9a7f6e5d4c3b2a1f0e9d8"),
            ("Hello, World!", True, "Hello, World!"),
        ],
    )
    def test_round_trip(self, cursor, value, nullable, expected):
        write_osu_string(cursor, value, nullable)
        cursor.seek(0)
        assert read_osu_string(cursor) == expected
        assert cursor.at_end()

    def test_unknown_tag_is_absent(self):
        """Any tag other than 0x0B reads as absent after one byte."""
        cursor = ByteCursor.from_bytes(b"\x01\x05hello")
        assert read_osu_string(cursor) is None
        assert cursor.position == 1

    def test_tag_values(self):
        assert StringTag.ABSENT == 0
        assert StringTag.PRESENT == 0x0B

    def test_truncated_body(self):
        """A body shorter than its length underflows and rewinds."""
        cursor = ByteCursor.from_bytes(b"\x0b\x05he")
        with pytest.raises(BufferUnderflow):
            read_osu_string(cursor)
        assert cursor.position == 0

    def test_missing_length(self):
        cursor = ByteCursor.from_bytes(b"\x0b")
        with pytest.raises(BufferUnderflow):
            read_osu_string(cursor)
        assert cursor.position == 0

    def test_consecutive(self, cursor):
        """Strings read back in the order they were written."""
        write_osu_string(cursor, "first")
        write_osu_string(cursor, None, nullable=True)
        write_osu_string(cursor, "third")
        cursor.seek(0)
        assert read_osu_string(cursor) == "first"
        assert read_osu_string(cursor) is None
        assert read_osu_string(cursor) == "third"


class TestPlainString:
    """Tests for strings with no tag or length prefix."""

    def test_write(self, cursor):
        write_string(cursor, "osu!")
        assert cursor.getvalue() == b"osu!"

    def test_read(self):
        cursor = ByteCursor.from_bytes(b"caf\xe9tail")
        assert read_string(cursor, 4) == "caf\xe9"
        assert cursor.position == 4

    def test_empty(self, cursor):
        write_string(cursor, "")
        assert cursor.length == 0
        assert read_string(cursor, 0) == ""

    def test_short_read(self):
        cursor = ByteCursor.from_bytes(b"ab")
        with pytest.raises(BufferUnderflow):
            read_string(cursor, 3)
        assert cursor.position == 0
