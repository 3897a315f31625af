from __future__ import annotations

from enum import IntEnum


class StringTag(IntEnum):
    """The leading byte of an osu! string."""

    ABSENT = 0
    PRESENT = 11  # 0x0B
