"""datetime -> Unix timestamp conversions.

Two flavours:
  - local: both the value and the epoch are read as wall-clock time in the
    local zone and the wall clocks are subtracted (DST/offset changes between
    1970 and ``dt`` show up in the result)
  - UTC: plain elapsed time since 1970-01-01T00:00:00Z

Naive datetimes are taken as local time. Results are whole seconds or
milliseconds truncated toward zero.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_US_PER_SECOND = 1_000_000
_US_PER_MILLISECOND = 1_000


def _require_datetime(dt: datetime) -> None:
    if not isinstance(dt, datetime):
        raise TypeError(f"expected datetime, got {type(dt).__name__}")


def _total_us(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * _US_PER_SECOND + delta.microseconds


def _truncate(us: int, unit: int) -> int:
    q = abs(us) // unit
    return q if us >= 0 else -q


def _as_utc(dt: datetime) -> datetime:
    # astimezone() on a naive datetime assumes local time
    return dt.astimezone(timezone.utc)


def _local_wall_clock(dt: datetime, tz: tzinfo | None) -> datetime:
    if dt.tzinfo is None and tz is not None:
        dt = dt.replace(tzinfo=tz)
    return dt.astimezone(tz).replace(tzinfo=None)


def _local_delta_us(dt: datetime, tz: tzinfo | None) -> int:
    _require_datetime(dt)
    epoch_local = _local_wall_clock(UNIX_EPOCH, tz)
    return _total_us(_local_wall_clock(dt, tz) - epoch_local)


def _utc_delta_us(dt: datetime) -> int:
    _require_datetime(dt)
    return _total_us(_as_utc(dt) - UNIX_EPOCH)


def to_timestamp(dt: datetime, tz: tzinfo | None = None) -> int:
    """Local timestamp in seconds. ``tz`` overrides the process local zone."""
    return _truncate(_local_delta_us(dt, tz), _US_PER_SECOND)


def to_timestamp_ms(dt: datetime, tz: tzinfo | None = None) -> int:
    return _truncate(_local_delta_us(dt, tz), _US_PER_MILLISECOND)


def to_utc_timestamp(dt: datetime) -> int:
    return _truncate(_utc_delta_us(dt), _US_PER_SECOND)


def to_utc_timestamp_ms(dt: datetime) -> int:
    return _truncate(_utc_delta_us(dt), _US_PER_MILLISECOND)
