from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from osubuffer.codecs.primitives import pack_primitive
from osubuffer.codecs.primitives import read_i16
from osubuffer.codecs.primitives import read_i32
from osubuffer.codecs.primitives import read_primitive
from osubuffer.constants.primitive import Primitive
from osubuffer.objects.cursor import BufferUnderflow
from osubuffer.objects.cursor import ByteCursor

ARRAY_COUNT = Primitive.I16
PAIRS_COUNT = Primitive.I32


def read_array(cursor: ByteCursor, element: Primitive) -> list[Any]:
    """Reads an i16 element count followed by that many `element` values.

    A negative count reads as an empty array.
    """

    start = cursor.position

    try:
        count = read_i16(cursor)
        return [read_primitive(cursor, element) for _ in range(count)]
    except BufferUnderflow:
        cursor.position = start
        raise


def write_array(cursor: ByteCursor, element: Primitive, values: Iterable[Any]) -> None:
    values = list(values)

    # Packed before writing so a bad element leaves the cursor untouched.
    data = bytearray(pack_primitive(ARRAY_COUNT, len(values)))
    for value in values:
        data += pack_primitive(element, value)

    cursor.write(data)


def read_pairs(cursor: ByteCursor, key: Primitive, value: Primitive) -> dict[Any, Any]:
    """Reads an i32 pair count followed by that many key/value pairs.

    A key that appears more than once keeps the last value read for it.
    """

    start = cursor.position

    try:
        count = read_i32(cursor)

        pairs = {}
        for _ in range(count):
            pair_key = read_primitive(cursor, key)
            pairs[pair_key] = read_primitive(cursor, value)

        return pairs
    except BufferUnderflow:
        cursor.position = start
        raise


def write_pairs(
    cursor: ByteCursor,
    key: Primitive,
    value: Primitive,
    pairs: Mapping[Any, Any],
) -> None:
    data = bytearray(pack_primitive(PAIRS_COUNT, len(pairs)))
    for pair_key, pair_value in pairs.items():
        data += pack_primitive(key, pair_key)
        data += pack_primitive(value, pair_value)

    cursor.write(data)


def read_i32_array(cursor: ByteCursor) -> list[int]:
    return read_array(cursor, Primitive.I32)


def write_i32_array(cursor: ByteCursor, values: Iterable[int]) -> None:
    write_array(cursor, Primitive.I32, values)


def read_i32_f64_pairs(cursor: ByteCursor) -> dict[int, float]:
    return read_pairs(cursor, Primitive.I32, Primitive.F64)


def write_i32_f64_pairs(cursor: ByteCursor, pairs: Mapping[int, float]) -> None:
    write_pairs(cursor, Primitive.I32, Primitive.F64, pairs)
