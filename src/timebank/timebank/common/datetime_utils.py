from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterator, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError

_ONE_SECOND = timedelta(seconds=1)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: "str | time") -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into a time."""
    if isinstance(value, time):
        return value
    v = (value or "").strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time of day: {value!r} (expected HH:MM)")


def get_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {name!r}") from exc


def now_local(tz: tzinfo) -> datetime:
    """Current time in the civil timezone."""
    return datetime.now(tz)


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Express a timestamp in the civil timezone (naive values are taken as already local)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def local_today(now: Optional[datetime], tz: tzinfo) -> date:
    return to_local(now or now_local(tz), tz).date()


def seconds_between(start: datetime, end: datetime) -> int:
    """Whole elapsed seconds from start to end (negative when end is earlier).

    Computed on UTC instants, so a shift crossing a DST change counts real time.
    """
    return (end.astimezone(timezone.utc) - start.astimezone(timezone.utc)) // _ONE_SECOND


def seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date from start to end, inclusive, ascending."""
    current = start
    step = timedelta(days=1)
    while current <= end:
        yield current
        current += step
