from __future__ import annotations

from .constants.primitive import Primitive
from .constants.string_tag import StringTag
from .objects.binary import BinaryReader
from .objects.binary import BinaryWriter
from .objects.cursor import BufferOverflow
from .objects.cursor import BufferUnderflow
from .objects.cursor import ByteCursor

__all__ = (
    "BinaryReader",
    "BinaryWriter",
    "BufferOverflow",
    "BufferUnderflow",
    "ByteCursor",
    "Primitive",
    "StringTag",
)
