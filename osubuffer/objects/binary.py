from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from datetime import datetime
from typing import Any
from typing import Optional

from osubuffer.codecs import collection
from osubuffer.codecs import primitives
from osubuffer.codecs import string
from osubuffer.codecs import timestamp
from osubuffer.codecs import varint
from osubuffer.constants.primitive import Primitive
from osubuffer.objects.cursor import ByteCursor
from osubuffer.objects.cursor import BytesLike


class BinaryReader:
    """A binary reader used for deserialisation. Primarily includes osu!'s types."""

    __slots__ = ("cursor",)

    def __init__(self, cursor: ByteCursor) -> None:
        self.cursor = cursor

    @classmethod
    def from_bytes(cls, data: BytesLike) -> BinaryReader:
        return cls(ByteCursor.from_bytes(data))

    @classmethod
    def from_string(cls, value: str) -> BinaryReader:
        return cls(ByteCursor.from_string(value))

    def can_read(self, size: int) -> bool:
        return self.cursor.can_read(size)

    def at_end(self) -> bool:
        return self.cursor.at_end()

    def read_u64_le(self) -> int:
        """Read a 64-bit unsigned integer from the buffer."""
        return primitives.read_u64(self.cursor)

    def read_i64_le(self) -> int:
        """Read a 64-bit integer from the buffer."""
        return primitives.read_i64(self.cursor)

    def read_i32_le(self) -> int:
        """Read a 32-bit integer from the buffer."""
        return primitives.read_i32(self.cursor)

    def read_u32_le(self) -> int:
        """Read a 32-bit unsigned integer from the buffer."""
        return primitives.read_u32(self.cursor)

    def read_i16_le(self) -> int:
        """Read a 16-bit integer from the buffer."""
        return primitives.read_i16(self.cursor)

    def read_u16_le(self) -> int:
        """Read a 16-bit unsigned integer from the buffer."""
        return primitives.read_u16(self.cursor)

    def read_i8_le(self) -> int:
        """Read a 8-bit integer from the buffer."""
        return primitives.read_i8(self.cursor)

    def read_u8_le(self) -> int:
        """Read a 8-bit unsigned integer from the buffer."""
        return primitives.read_u8(self.cursor)

    def read_f32_le(self) -> float:
        return primitives.read_f32(self.cursor)

    def read_f64_le(self) -> float:
        return primitives.read_f64(self.cursor)

    def read_bool(self) -> bool:
        return primitives.read_bool(self.cursor)

    def read_raw(self, size: int) -> bytes:
        """Read `size` raw bytes from the buffer."""
        return primitives.read_raw(self.cursor, size)

    def read_int(self, size: int) -> int:
        """Read a signed integer of any byte width from the buffer."""
        return primitives.read_int(self.cursor, size)

    def read_uint(self, size: int) -> int:
        """Read an unsigned integer of any byte width from the buffer."""
        return primitives.read_uint(self.cursor, size)

    def read_string(self, length: int) -> str:
        return string.read_string(self.cursor, length)

    def read_uleb128(self) -> int:
        """Read a uleb128 value from the buffer."""
        return varint.read_uleb128(self.cursor)

    def read_osu_string(self) -> Optional[str]:
        """Read an osu! protocol style string, or `None` if it is absent."""
        return string.read_osu_string(self.cursor)

    def read_datetime(self) -> datetime:
        return timestamp.read_datetime(self.cursor)

    def read_array(self, element: Primitive) -> list[Any]:
        return collection.read_array(self.cursor, element)

    def read_i32_array(self) -> list[int]:
        return collection.read_i32_array(self.cursor)

    def read_pairs(self, key: Primitive, value: Primitive) -> dict[Any, Any]:
        return collection.read_pairs(self.cursor, key, value)

    def read_i32_f64_pairs(self) -> dict[int, float]:
        return collection.read_i32_f64_pairs(self.cursor)


class BinaryWriter:
    """A binary writer used for serialisation. Primarily includes osu!'s types."""

    __slots__ = ("cursor",)

    def __init__(self, cursor: Optional[ByteCursor] = None) -> None:
        if cursor is None:
            cursor = ByteCursor.empty()

        self.cursor = cursor

    @property
    def buffer(self) -> bytes:
        return self.cursor.getvalue()

    def write_uleb128(self, value: int) -> BinaryWriter:
        """Write a uleb128 value to the buffer."""
        varint.write_uleb128(self.cursor, value)
        return self

    def write_u64_le(self, value: int) -> BinaryWriter:
        """Write a 64-bit unsigned integer to the buffer."""
        primitives.write_u64(self.cursor, value)
        return self

    def write_i64_le(self, value: int) -> BinaryWriter:
        """Write a 64-bit integer to the buffer."""
        primitives.write_i64(self.cursor, value)
        return self

    def write_i32_le(self, value: int) -> BinaryWriter:
        """Write a 32-bit integer to the buffer."""
        primitives.write_i32(self.cursor, value)
        return self

    def write_u32_le(self, value: int) -> BinaryWriter:
        """Write a 32-bit unsigned integer to the buffer."""
        primitives.write_u32(self.cursor, value)
        return self

    def write_i16_le(self, value: int) -> BinaryWriter:
        """Write a 16-bit integer to the buffer."""
        primitives.write_i16(self.cursor, value)
        return self

    def write_u16_le(self, value: int) -> BinaryWriter:
        """Write a 16-bit unsigned integer to the buffer."""
        primitives.write_u16(self.cursor, value)
        return self

    def write_i8_le(self, value: int) -> BinaryWriter:
        """Write a 8-bit integer to the buffer."""
        primitives.write_i8(self.cursor, value)
        return self

    def write_u8_le(self, value: int) -> BinaryWriter:
        """Write a 8-bit unsigned integer to the buffer."""
        primitives.write_u8(self.cursor, value)
        return self

    def write_f32_le(self, value: float) -> BinaryWriter:
        primitives.write_f32(self.cursor, value)
        return self

    def write_f64_le(self, value: float) -> BinaryWriter:
        primitives.write_f64(self.cursor, value)
        return self

    def write_bool(self, value: bool) -> BinaryWriter:
        primitives.write_bool(self.cursor, value)
        return self

    def write_raw(self, data: BytesLike) -> BinaryWriter:
        """Write raw data to the buffer."""
        primitives.write_raw(self.cursor, data)
        return self

    def write_int(self, value: int, size: int) -> BinaryWriter:
        """Write a signed integer of any byte width to the buffer."""
        primitives.write_int(self.cursor, value, size)
        return self

    def write_uint(self, value: int, size: int) -> BinaryWriter:
        """Write an unsigned integer of any byte width to the buffer."""
        primitives.write_uint(self.cursor, value, size)
        return self

    def write_string(self, string_value: str) -> BinaryWriter:
        """Write a string with no tag or length prefix."""
        string.write_string(self.cursor, string_value)
        return self

    def write_osu_string(
        self,
        string_value: Optional[str],
        nullable: bool = False,
    ) -> BinaryWriter:
        """Write an osu! protocol style string.
        An osu! protocol string consists of an 'exists' byte, followed
        by a uleb128 length, followed by the string itself.
        """
        string.write_osu_string(self.cursor, string_value, nullable)
        return self

    def write_datetime(self, value: datetime) -> BinaryWriter:
        timestamp.write_datetime(self.cursor, value)
        return self

    def write_array(self, element: Primitive, values: Iterable[Any]) -> BinaryWriter:
        collection.write_array(self.cursor, element, values)
        return self

    def write_i32_array(self, values: Iterable[int]) -> BinaryWriter:
        collection.write_i32_array(self.cursor, values)
        return self

    def write_pairs(
        self,
        key: Primitive,
        value: Primitive,
        pairs: Mapping[Any, Any],
    ) -> BinaryWriter:
        collection.write_pairs(self.cursor, key, value, pairs)
        return self

    def write_i32_f64_pairs(self, pairs: Mapping[int, float]) -> BinaryWriter:
        collection.write_i32_f64_pairs(self.cursor, pairs)
        return self
