from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union

from ..common.datetime_utils import local_today, parse_iso_date
from ..core.constants import DEFAULT_FIRST_WEEKDAY
from ..core.enums import Granularity, Weekday
from ..core.exceptions import InvalidWindowError

DateInput = Union[date, str, None]


def parse_granularity(value: "Granularity | str | None") -> Optional[Granularity]:
    if value is None or isinstance(value, Granularity):
        return value
    v = str(value).strip().lower()
    if not v:
        return None
    try:
        return Granularity(v)
    except ValueError as exc:
        raise InvalidWindowError(f"Invalid period {value!r}. Use day, week, month or year.") from exc


class PeriodWindowBuilder:
    """Normalizes (start, end, granularity) into an inclusive date range.

    Explicit dates win; otherwise the granularity names the calendar-aligned
    day/week/month/year that contains "now" in the civil timezone.
    """

    def __init__(self, tz: tzinfo, *, first_weekday: Weekday = DEFAULT_FIRST_WEEKDAY):
        self._tz = tz
        self._first_weekday = Weekday.parse(first_weekday)

    def build_window(
        self,
        explicit_start: DateInput = None,
        explicit_end: DateInput = None,
        granularity: "Granularity | str | None" = None,
        *,
        now: Optional[datetime] = None,
    ) -> tuple[date, date]:
        start = self._as_date(explicit_start, "startDate")
        end = self._as_date(explicit_end, "endDate")
        period = parse_granularity(granularity)

        if start is not None and end is not None:
            window = (start, end)
        elif start is not None or end is not None:
            raise InvalidWindowError("startDate and endDate must be provided together")
        elif period is not None:
            window = self._calendar_window(period, local_today(now, self._tz))
        else:
            raise InvalidWindowError(
                "Provide startDate and endDate or a valid period (day, week, month, year)."
            )

        if window[0] > window[1]:
            raise InvalidWindowError("startDate must not be after endDate")
        return window

    def _calendar_window(self, period: Granularity, today: date) -> tuple[date, date]:
        if period is Granularity.DAY:
            return today, today
        if period is Granularity.WEEK:
            offset = (today.weekday() - self._first_weekday.position) % 7
            first = today - timedelta(days=offset)
            return first, first + timedelta(days=6)
        if period is Granularity.MONTH:
            last_day = calendar.monthrange(today.year, today.month)[1]
            return today.replace(day=1), today.replace(day=last_day)
        return date(today.year, 1, 1), date(today.year, 12, 31)

    @staticmethod
    def _as_date(value: DateInput, field_name: str) -> Optional[date]:
        if isinstance(value, datetime):
            return value.date()
        if value is None or isinstance(value, date):
            return value
        v = str(value).strip()
        if not v:
            return None
        try:
            return parse_iso_date(v)
        except ValueError as exc:
            raise InvalidWindowError(f"{field_name} must be YYYY-MM-DD") from exc
