from __future__ import annotations

from datetime import datetime

from osubuffer.codecs.primitives import read_u64
from osubuffer.codecs.primitives import write_u64
from osubuffer.objects.cursor import ByteCursor
from osubuffer.utils.datetime import datetime_to_ticks
from osubuffer.utils.datetime import ticks_to_datetime


def read_datetime(cursor: ByteCursor) -> datetime:
    """Reads a 64-bit tick count as a UTC datetime, to millisecond precision.

    Tick counts past the end of year 9999 raise `OverflowError` and leave
    the cursor where it was.
    """

    start = cursor.position
    ticks = read_u64(cursor)

    try:
        return ticks_to_datetime(ticks)
    except OverflowError:
        cursor.position = start
        raise


def write_datetime(cursor: ByteCursor, value: datetime) -> None:
    write_u64(cursor, datetime_to_ticks(value))
