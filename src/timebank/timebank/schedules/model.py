from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_time_of_day, seconds_of_day
from ..core.constants import SECONDS_PER_MINUTE
from ..core.enums import Weekday
from ..core.exceptions import ScheduleError, ValidationError


@dataclass(frozen=True)
class WeekDaySchedule:
    """Domain entity: expected working hours for one weekday."""

    weekday: Weekday
    start: Optional[time] = None
    end: Optional[time] = None
    has_lunch: bool = False
    expected_lunch_break_seconds: int = 0
    is_day_off: bool = False

    def __post_init__(self) -> None:
        if self.expected_lunch_break_seconds < 0:
            raise ScheduleError(f"{self.weekday.value}: lunch break must not be negative")
        if self.is_day_off:
            return
        if self.start is None or self.end is None:
            raise ScheduleError(f"{self.weekday.value}: start and end are required on working days")
        if self.end <= self.start:
            raise ScheduleError(f"{self.weekday.value}: end must be after start")
        if self.has_lunch and self.expected_lunch_break_seconds > self.span_seconds:
            raise ScheduleError(f"{self.weekday.value}: lunch break longer than the working day")

    @property
    def span_seconds(self) -> int:
        if self.start is None or self.end is None:
            return 0
        return seconds_of_day(self.end) - seconds_of_day(self.start)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "WeekDaySchedule":
        """Build an entry from the stored/API shape.

        Accepts ``day`` or ``weekday``, ``"HH:MM"`` strings for start/end and
        the lunch break either in minutes (``expectedLunchBreakMinutes``) or
        in seconds (``expectedLunchBreakSeconds``).
        """

        try:
            weekday = Weekday.parse(raw.get("weekday") or raw.get("day") or "")
        except ValueError as exc:
            raise ScheduleError(f"Unknown weekday: {raw.get('weekday') or raw.get('day')!r}") from exc

        is_day_off = bool(raw.get("isDayOff", raw.get("is_day_off", False)))
        has_lunch = bool(raw.get("hasLunch", raw.get("has_lunch", False)))

        if raw.get("expectedLunchBreakSeconds") is not None:
            lunch = raw["expectedLunchBreakSeconds"]
        elif raw.get("expected_lunch_break_seconds") is not None:
            lunch = raw["expected_lunch_break_seconds"]
        else:
            lunch = int(raw.get("expectedLunchBreakMinutes") or 0) * SECONDS_PER_MINUTE

        try:
            start = parse_time_of_day(raw["start"]) if raw.get("start") else None
            end = parse_time_of_day(raw["end"]) if raw.get("end") else None
            lunch = int(lunch)
        except (ValidationError, TypeError, ValueError) as exc:
            raise ScheduleError(f"{weekday.value}: {exc}") from exc

        return cls(
            weekday=weekday,
            start=start,
            end=end,
            has_lunch=has_lunch,
            expected_lunch_break_seconds=lunch if has_lunch else 0,
            is_day_off=is_day_off,
        )

    def to_dict(self) -> dict:
        return {
            "weekday": self.weekday.value,
            "start": self.start.strftime("%H:%M:%S") if self.start else None,
            "end": self.end.strftime("%H:%M:%S") if self.end else None,
            "hasLunch": self.has_lunch,
            "expectedLunchBreakSeconds": self.expected_lunch_break_seconds,
            "isDayOff": self.is_day_off,
        }


@dataclass(frozen=True)
class WorkSchedule:
    """An employee's weekly schedule: at most one entry per weekday."""

    employee_id: int
    days: Mapping[Weekday, WeekDaySchedule] = field(default_factory=dict)

    def entry_for(self, weekday: Weekday) -> Optional[WeekDaySchedule]:
        return self.days.get(weekday)

    @classmethod
    def from_entries(cls, employee_id: int, entries: Iterable[WeekDaySchedule]) -> "WorkSchedule":
        days: dict[Weekday, WeekDaySchedule] = {}
        for entry in entries:
            if entry.weekday in days:
                raise ScheduleError(f"Duplicate schedule entry for {entry.weekday.value}")
            days[entry.weekday] = entry
        return cls(employee_id=int(employee_id), days=days)

    def to_dict(self) -> dict:
        ordered = sorted(self.days.values(), key=lambda d: d.weekday.position)
        return {"employeeId": self.employee_id, "days": [d.to_dict() for d in ordered]}
