from __future__ import annotations

from typing import Optional, Protocol

from .model import WorkSchedule


class ScheduleRepository(Protocol):
    def get_for_employee(self, employee_id: int) -> Optional[WorkSchedule]:
        raise NotImplementedError

    def replace(self, schedule: WorkSchedule) -> None:
        """Store the schedule, dropping weekdays that are no longer listed."""

        raise NotImplementedError
