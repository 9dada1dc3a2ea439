"""Signed durations rendered as ``-?HH:MM:SS``.

Hours are not wrapped at 24, so period totals such as ``173:20:00`` keep
their full size. Fractional hours are rounded half-up to the second before
formatting; everything else works on whole seconds.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..core.constants import SECONDS_PER_HOUR
from ..core.exceptions import ValidationError

_DURATION_RE = re.compile(r"^(-)?(\d{2,}):([0-5]\d):([0-5]\d)$")


def format_duration(seconds: int) -> str:
    seconds = int(seconds)
    sign = "-" if seconds < 0 else ""
    total = abs(seconds)
    hours, rest = divmod(total, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def hours_to_seconds(hours: Union[Decimal, int, float, str]) -> int:
    # str() keeps floats like 0.1 from dragging binary noise into the Decimal
    value = hours if isinstance(hours, Decimal) else Decimal(str(hours))
    if not value.is_finite():
        raise ValidationError(f"Invalid hour amount: {hours!r}")
    return int((value * SECONDS_PER_HOUR).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_hours(hours: Union[Decimal, int, float, str]) -> str:
    return format_duration(hours_to_seconds(hours))


def parse_duration(value: str) -> int:
    m = _DURATION_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Invalid duration: {value!r} (expected [-]HH:MM:SS)")
    sign, hours, minutes, secs = m.groups()
    total = int(hours) * SECONDS_PER_HOUR + int(minutes) * 60 + int(secs)
    return -total if sign else total
