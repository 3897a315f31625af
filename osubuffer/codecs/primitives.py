from __future__ import annotations

import struct
from typing import Any
from typing import Union

from osubuffer.constants.primitive import Primitive
from osubuffer.objects.cursor import ByteCursor
from osubuffer.objects.cursor import BytesLike

Number = Union[int, float]


def read_primitive(cursor: ByteCursor, primitive: Primitive) -> Any:
    """Reads a single little-endian value of the given type."""

    return struct.unpack(primitive.struct_format, cursor.slice(primitive.size))[0]


def pack_primitive(primitive: Primitive, value: Number) -> bytes:
    return struct.pack(primitive.struct_format, value)


def write_primitive(cursor: ByteCursor, primitive: Primitive, value: Number) -> None:
    """Writes a single little-endian value of the given type.

    The value is packed before anything is written, so a value the type
    cannot hold raises `struct.error` and leaves the cursor untouched.
    """

    cursor.write(pack_primitive(primitive, value))


def read_u8(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.U8)


def read_i8(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.I8)


def read_u16(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.U16)


def read_i16(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.I16)


def read_u32(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.U32)


def read_i32(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.I32)


def read_u64(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.U64)


def read_i64(cursor: ByteCursor) -> int:
    return read_primitive(cursor, Primitive.I64)


def read_f32(cursor: ByteCursor) -> float:
    return read_primitive(cursor, Primitive.F32)


def read_f64(cursor: ByteCursor) -> float:
    return read_primitive(cursor, Primitive.F64)


def read_bool(cursor: ByteCursor) -> bool:
    return read_u8(cursor) != 0


def read_raw(cursor: ByteCursor, size: int) -> bytes:
    return cursor.slice(size)


def write_u8(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.U8, value)


def write_i8(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.I8, value)


def write_u16(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.U16, value)


def write_i16(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.I16, value)


def write_u32(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.U32, value)


def write_i32(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.I32, value)


def write_u64(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.U64, value)


def write_i64(cursor: ByteCursor, value: int) -> None:
    write_primitive(cursor, Primitive.I64, value)


def write_f32(cursor: ByteCursor, value: float) -> None:
    write_primitive(cursor, Primitive.F32, value)


def write_f64(cursor: ByteCursor, value: float) -> None:
    write_primitive(cursor, Primitive.F64, value)


def write_bool(cursor: ByteCursor, value: bool) -> None:
    write_u8(cursor, 1 if value else 0)


def write_raw(cursor: ByteCursor, data: BytesLike) -> None:
    cursor.write(data)


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("An integer must be at least one byte wide.")


def read_int(cursor: ByteCursor, size: int) -> int:
    """Reads a little-endian signed integer `size` bytes wide."""

    _check_size(size)
    return int.from_bytes(cursor.slice(size), "little", signed=True)


def read_uint(cursor: ByteCursor, size: int) -> int:
    """Reads a little-endian unsigned integer `size` bytes wide."""

    _check_size(size)
    return int.from_bytes(cursor.slice(size), "little", signed=False)


def write_int(cursor: ByteCursor, value: int, size: int) -> None:
    """Writes a little-endian signed integer `size` bytes wide.

    A value the width cannot hold raises `OverflowError` before writing.
    """

    _check_size(size)
    cursor.write(value.to_bytes(size, "little", signed=True))


def write_uint(cursor: ByteCursor, value: int, size: int) -> None:
    _check_size(size)
    cursor.write(value.to_bytes(size, "little", signed=False))
