from __future__ import annotations

import functools
import struct
from enum import Enum


class Primitive(str, Enum):
    """A fixed-width, little-endian value type."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    def __repr__(self) -> str:
        return _PRIMITIVE_NAMES[self]

    @functools.cached_property
    def struct_format(self) -> str:
        return "<" + _STRUCT_CODES[self]

    @functools.cached_property
    def size(self) -> int:
        return struct.calcsize(self.struct_format)


_STRUCT_CODES = {
    Primitive.U8: "B",
    Primitive.I8: "b",
    Primitive.U16: "H",
    Primitive.I16: "h",
    Primitive.U32: "I",
    Primitive.I32: "i",
    Primitive.U64: "Q",
    Primitive.I64: "q",
    Primitive.F32: "f",
    Primitive.F64: "d",
}

_PRIMITIVE_NAMES = {
    Primitive.U8: "uint8",
    Primitive.I8: "int8",
    Primitive.U16: "uint16",
    Primitive.I16: "int16",
    Primitive.U32: "uint32",
    Primitive.I32: "int32",
    Primitive.U64: "uint64",
    Primitive.I64: "int64",
    Primitive.F32: "float32",
    Primitive.F64: "float64",
}
