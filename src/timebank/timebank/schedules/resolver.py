from __future__ import annotations

from typing import Optional

from ..core.enums import Weekday
from ..core.exceptions import ScheduleError
from .model import WeekDaySchedule, WorkSchedule


class ScheduleResolver:
    """Turns a weekly schedule into expected seconds per weekday.

    Stateless; one instance can be shared by every request.
    """

    def entry(self, schedule: WorkSchedule, weekday: Weekday) -> Optional[WeekDaySchedule]:
        if not isinstance(schedule, WorkSchedule):
            raise ScheduleError("Malformed schedule")
        return schedule.entry_for(weekday)

    def is_working_day(self, schedule: WorkSchedule, weekday: Weekday) -> bool:
        return self.is_working_entry(self.entry(schedule, weekday))

    def expected_seconds(self, schedule: WorkSchedule, weekday: Weekday) -> int:
        return self.expected_for_entry(self.entry(schedule, weekday))

    @staticmethod
    def is_working_entry(entry: Optional[WeekDaySchedule]) -> bool:
        return entry is not None and not entry.is_day_off

    @staticmethod
    def expected_for_entry(entry: Optional[WeekDaySchedule]) -> int:
        if entry is None or entry.is_day_off:
            return 0
        lunch = entry.expected_lunch_break_seconds if entry.has_lunch else 0
        return max(entry.span_seconds - lunch, 0)
