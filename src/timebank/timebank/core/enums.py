from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Weekday keys used by work schedules (Monday is 0, like date.weekday())."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value: "str | Weekday") -> "Weekday":
        if isinstance(value, Weekday):
            return value
        return cls(str(value).strip().lower())

    @classmethod
    def of(cls, day) -> "Weekday":
        return _BY_INDEX[day.weekday()]

    @property
    def position(self) -> int:
        return _BY_INDEX.index(self)


_BY_INDEX = list(Weekday)


class AbsenceType(str, Enum):
    """Absence kinds registered by a supervisor for a past date."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    JUSTIFIED = "justified"
    UNJUSTIFIED = "unjustified"
    HOLIDAY = "holiday"
    DAY_OFF = "day_off"

    @property
    def is_excused(self) -> bool:
        return self is not AbsenceType.UNJUSTIFIED


class DayCategory(str, Enum):
    """Mutually exclusive outcome of classifying one calendar day."""

    DAY_OFF = "day_off"
    ABSENCE = "absence"
    COMPLETE = "complete"
    PARTIAL = "partial"
    NO_RECORD = "no_record"


class BalanceLabel(str, Enum):
    OVERTIME = "overtime"
    SHORTFALL = "shortfall"
    EXACT = "exact"
    INCOMPLETE = "incomplete"
    NO_RECORD = "no_record"
    DAY_OFF = "day_off"


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class PunchField(str, Enum):
    """Timestamp columns of a punch record, in chronological order."""

    CLOCK_IN = "clock_in"
    LUNCH_START = "lunch_start"
    LUNCH_END = "lunch_end"
    CLOCK_OUT = "clock_out"
