from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..core.exceptions import NotFoundError, ValidationError
from .model import WeekDaySchedule, WorkSchedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def set_schedule(self, *, employee_id: int, days: Iterable[Mapping[str, Any]]) -> WorkSchedule:
        if int(employee_id) <= 0:
            raise ValidationError("Invalid employee")

        entries = [WeekDaySchedule.from_dict(d) for d in (days or [])]
        if not entries:
            raise ValidationError("A schedule needs at least one weekday")

        schedule = WorkSchedule.from_entries(int(employee_id), entries)
        self._schedules.replace(schedule)
        logger.info("Work schedule stored for employee %s (%d weekdays)", employee_id, len(entries))
        return schedule

    def get_schedule(self, employee_id: int) -> WorkSchedule:
        schedule = self._schedules.get_for_employee(int(employee_id))
        if not schedule:
            raise NotFoundError("Work schedule not found for this employee")
        return schedule
