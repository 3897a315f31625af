from __future__ import annotations

from typing import Optional

from osubuffer.codecs.primitives import read_raw
from osubuffer.codecs.primitives import read_u8
from osubuffer.codecs.primitives import write_u8
from osubuffer.codecs.varint import encode_uleb128
from osubuffer.codecs.varint import read_uleb128
from osubuffer.constants.string_tag import StringTag
from osubuffer.objects.cursor import BufferUnderflow
from osubuffer.objects.cursor import ByteCursor
from osubuffer.objects.cursor import STRING_ENCODING


def read_osu_string(cursor: ByteCursor) -> Optional[str]:
    """Reads an osu! protocol style string.

    Returns `None` when the leading byte is anything but the 'exists' tag
    (0x0B). Each byte of the body is decoded as a single character.
    """

    start = cursor.position

    try:
        if read_u8(cursor) != StringTag.PRESENT:
            return None

        length = read_uleb128(cursor)
        return read_raw(cursor, length).decode(STRING_ENCODING)
    except BufferUnderflow:
        cursor.position = start
        raise


def write_osu_string(
    cursor: ByteCursor,
    value: Optional[str],
    nullable: bool = False,
) -> None:
    """Write an osu! protocol style string.

    An osu! protocol string consists of an 'exists' byte, followed
    by a uleb128 length, followed by the string itself. Empty strings
    are written as a lone 'absent' byte when `nullable`, otherwise as
    an existing string of length zero.
    """

    if not value:
        if nullable:
            write_u8(cursor, StringTag.ABSENT)
        else:
            cursor.write(bytes((StringTag.PRESENT, 0)))
        return

    encoded_string = value.encode(STRING_ENCODING)
    cursor.write(
        bytes((StringTag.PRESENT,)) + encode_uleb128(len(encoded_string)) + encoded_string,
    )


def read_string(cursor: ByteCursor, length: int) -> str:
    """Reads `length` bytes as a string with no tag or length prefix."""

    return read_raw(cursor, length).decode(STRING_ENCODING)


def write_string(cursor: ByteCursor, value: str) -> None:
    cursor.write(value.encode(STRING_ENCODING))
