from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

# .NET `DateTime` ticks (100ns) between 0001-01-01 and the Unix epoch.
UNIX_EPOCH_TICKS = 621355968000000000  # 0x89F7FF5F7B58000

TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = 10_000_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def timestamp_to_dotnet_ticks(ts: int) -> int:
    """Converts a UNIX timestamp to a UTC ticks. Equivalent to the reverse of
    C#'s `DateTime.ToUniversalTime().Ticks`.
    """

    return ts * TICKS_PER_SECOND + UNIX_EPOCH_TICKS


def unix_ms_to_ticks(unix_ms: int) -> int:
    return unix_ms * TICKS_PER_MILLISECOND + UNIX_EPOCH_TICKS


def ticks_to_unix_ms(ticks: int) -> int:
    """Converts ticks to UNIX milliseconds, dropping sub-millisecond ticks."""

    return (ticks - UNIX_EPOCH_TICKS) // TICKS_PER_MILLISECOND


def datetime_to_unix_ms(value: datetime) -> int:
    """Returns the UNIX milliseconds of `value`. Naive datetimes are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return (value - UNIX_EPOCH) // _ONE_MILLISECOND


def unix_ms_to_datetime(unix_ms: int) -> datetime:
    return UNIX_EPOCH + timedelta(milliseconds=unix_ms)


def datetime_to_ticks(value: datetime) -> int:
    return unix_ms_to_ticks(datetime_to_unix_ms(value))


def ticks_to_datetime(ticks: int) -> datetime:
    return unix_ms_to_datetime(ticks_to_unix_ms(ticks))
