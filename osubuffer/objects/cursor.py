from __future__ import annotations

import logging
from typing import Optional
from typing import Union

from osubuffer import config

BytesLike = Union[bytes, bytearray, memoryview]

STRING_ENCODING = "latin-1"


class BufferUnderflow(IndexError):
    """Raised when a read needs more bytes than the cursor holds."""

    def __init__(self, requested: int, position: int, length: int) -> None:
        super().__init__(
            f"Cannot read {requested} bytes at position {position} "
            f"(buffer length {length}).",
        )
        self.requested = requested
        self.position = position
        self.length = length


class BufferOverflow(Exception):
    """Raised when a write would grow the buffer past its maximum capacity."""

    def __init__(self, requested: int, position: int, max_capacity: int) -> None:
        super().__init__(
            f"Cannot write {requested} bytes at position {position} "
            f"(maximum capacity {max_capacity}).",
        )
        self.requested = requested
        self.position = position
        self.max_capacity = max_capacity


class ByteCursor:
    """A byte buffer with a single read/write position.

    Only the first `length` bytes of the backing storage hold data; the rest
    is spare capacity for future writes. `0 <= position <= length <= capacity`
    holds after every operation.
    """

    __slots__ = (
        "_buffer",
        "_length",
        "position",
        "max_capacity",
    )

    def __init__(
        self,
        buffer: bytearray,
        length: int,
        *,
        max_capacity: Optional[int] = None,
    ) -> None:
        if not 0 <= length <= len(buffer):
            raise ValueError("Length must fit within the buffer.")

        self._buffer = buffer
        self._length = length
        self.position = 0
        self.max_capacity = max_capacity

    @classmethod
    def from_bytes(cls, data: BytesLike) -> ByteCursor:
        """Creates a cursor over a copy of `data`, positioned at its start.

        Raises `BufferOverflow` when `data` is already larger than the
        configured maximum capacity.
        """

        data = memoryview(data).cast("B")
        max_capacity = config.BUFFER_MAX_CAPACITY
        if max_capacity is not None and len(data) > max_capacity:
            raise BufferOverflow(len(data), 0, max_capacity)

        return cls(bytearray(data), len(data), max_capacity=max_capacity)

    @classmethod
    def from_existing(cls, cursor: ByteCursor) -> ByteCursor:
        """Creates an independent cursor holding the bytes of another one."""

        return cls(
            bytearray(cursor.getvalue()),
            cursor.length,
            max_capacity=cursor.max_capacity,
        )

    @classmethod
    def empty(
        cls,
        capacity: Optional[int] = None,
        max_capacity: Optional[int] = None,
    ) -> ByteCursor:
        if capacity is None:
            capacity = config.BUFFER_INITIAL_CAPACITY
        if max_capacity is None:
            max_capacity = config.BUFFER_MAX_CAPACITY
        if max_capacity is not None:
            capacity = min(capacity, max_capacity)

        return cls(bytearray(capacity), 0, max_capacity=max_capacity)

    @classmethod
    def from_string(cls, value: str) -> ByteCursor:
        """Creates a cursor where each character of `value` is one byte."""

        return cls.from_bytes(value.encode(STRING_ENCODING))

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (
            f"<ByteCursor(position={self.position}, length={self._length}, "
            f"capacity={self.capacity})>"
        )

    def remaining(self) -> int:
        return self._length - self.position

    def can_read(self, size: int) -> bool:
        return self.position + size <= self._length

    def at_end(self) -> bool:
        return self.position >= self._length

    def seek(self, position: int) -> None:
        if not 0 <= position <= self._length:
            raise ValueError(f"Cannot seek to {position} (buffer length {self._length}).")

        self.position = position

    def skip(self, size: int) -> None:
        self._check_readable(size, self.position)
        self.position += size

    def slice(self, size: int, offset: Optional[int] = None) -> bytes:
        """Returns `size` bytes from the buffer.

        Without an `offset` the bytes are taken from the current position,
        which then advances past them. With an `offset` the bytes are taken
        from that absolute offset and the position is left untouched.
        """

        start = self.position if offset is None else offset
        self._check_readable(size, start)

        data = bytes(self._buffer[start : start + size])
        if offset is None:
            self.position += size

        return data

    def peek(self, size: int = 1) -> bytes:
        return self.slice(size, offset=self.position)

    def write(self, data: BytesLike) -> None:
        """Writes `data` at the current position, overwriting or appending."""

        # Measured in bytes, whatever the item size of a memoryview.
        data = memoryview(data).cast("B")
        size = len(data)
        end = self.position + size
        self._ensure_capacity(end, size)

        self._buffer[self.position : end] = data
        self.position = end
        if end > self._length:
            self._length = end

    def getvalue(self) -> bytes:
        return bytes(self._buffer[: self._length])

    def _check_readable(self, size: int, start: int) -> None:
        if size < 0:
            raise ValueError("Cannot read a negative amount of bytes.")

        if start < 0 or start + size > self._length:
            raise BufferUnderflow(size, start, self._length)

    def _ensure_capacity(self, required: int, requested: int) -> None:
        capacity = len(self._buffer)
        if required <= capacity:
            return

        if self.max_capacity is not None and required > self.max_capacity:
            raise BufferOverflow(requested, self.position, self.max_capacity)

        new_capacity = max(capacity * 2, required)
        if self.max_capacity is not None:
            new_capacity = min(new_capacity, self.max_capacity)

        self._buffer.extend(bytes(new_capacity - capacity))
        logging.debug(
            "Grew cursor buffer.",
            extra={
                "old_capacity": capacity,
                "new_capacity": new_capacity,
            },
        )
