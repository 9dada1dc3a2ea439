from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...absences.model import AbsenceRecord
from ...punches.model import PunchRecord
from ...schedules.model import WeekDaySchedule
from ..model import DayResult


@dataclass(frozen=True)
class DayContext:
    """Everything known about one calendar day when it is classified.

    ``now`` is already expressed in the civil timezone.
    """

    work_date: date
    entry: Optional[WeekDaySchedule]
    expected_seconds: int
    now: datetime
    punch: Optional[PunchRecord] = None
    absence: Optional[AbsenceRecord] = None

    @property
    def is_today(self) -> bool:
        return self.work_date == self.now.date()


class DayRule(ABC):
    """Strategy Pattern: one way a day can settle against its schedule."""

    @abstractmethod
    def decide(self, ctx: DayContext) -> DayResult:
        raise NotImplementedError
