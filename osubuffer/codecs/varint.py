from __future__ import annotations

from osubuffer.codecs.primitives import read_u8
from osubuffer.objects.cursor import BufferUnderflow
from osubuffer.objects.cursor import ByteCursor


def read_uleb128(cursor: ByteCursor) -> int:
    """Reads an unsigned LEB128 (7 bits per byte) integer.

    Decoding stops at the first byte without the 0x80 continuation bit. A run
    that never ends raises `BufferUnderflow` once the buffer is exhausted.
    The result is never truncated to a fixed width.
    """

    start = cursor.position
    value = 0
    shift = 0

    try:
        while True:
            byte = read_u8(cursor)
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return value
            shift += 7
    except BufferUnderflow:
        cursor.position = start
        raise


def encode_uleb128(value: int) -> bytes:
    if value < 0:
        raise ValueError("Cannot encode a negative value as uleb128.")

    ret = bytearray()

    while True:
        ret.append(value & 0b01111111)
        value >>= 7
        if value == 0:
            return bytes(ret)
        ret[-1] |= 0b10000000


def write_uleb128(cursor: ByteCursor, value: int) -> None:
    """Writes a uleb128 value. Zero is written as a single 0x00 byte."""

    cursor.write(encode_uleb128(value))
