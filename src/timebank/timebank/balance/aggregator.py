from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from ..absences.model import AbsenceRecord
from ..common.datetime_utils import iter_dates, local_today, now_local, to_local
from ..core.enums import Granularity, Weekday
from ..punches.model import PunchRecord
from ..schedules.model import WorkSchedule
from ..schedules.resolver import ScheduleResolver
from .classifier import DayClassifier
from .model import DayResult, PeriodSummary

PunchLookup = Callable[[int, date], Optional[PunchRecord]]
AbsenceLookup = Callable[[int, date], Optional[AbsenceRecord]]


class BalanceAggregator:
    """Walks every date of a window and sums the signed day balances.

    Read-only and stateless: concurrent calls need no coordination.
    """

    def __init__(
        self,
        tz: tzinfo,
        *,
        classifier: DayClassifier | None = None,
        resolver: ScheduleResolver | None = None,
    ):
        self._tz = tz
        self._resolver = resolver or ScheduleResolver()
        self._classifier = classifier or DayClassifier(tz, resolver=self._resolver)

    def effective_range(
        self,
        requested_start: date,
        requested_end: date,
        employment_start_date: Optional[date],
        *,
        now: Optional[datetime] = None,
    ) -> tuple[date, date]:
        """Clip to employment start and to today; the result may be empty (start > end)."""

        start = requested_start
        if employment_start_date is not None and employment_start_date > start:
            start = employment_start_date
        end = min(requested_end, local_today(now, self._tz))
        return start, end

    def aggregate(
        self,
        employee_id: int,
        requested_start: date,
        requested_end: date,
        schedule: WorkSchedule,
        punch_lookup: PunchLookup,
        absence_lookup: AbsenceLookup,
        employment_start_date: Optional[date],
        *,
        now: Optional[datetime] = None,
        granularity: Optional[Granularity] = None,
    ) -> PeriodSummary:
        now = to_local(now, self._tz) if now else now_local(self._tz)
        start, end = self.effective_range(requested_start, requested_end, employment_start_date, now=now)

        results: list[DayResult] = []
        positive = 0
        negative = 0
        # iter_dates yields nothing when start > end (window in the future or before hiring).
        for day in iter_dates(start, end):
            entry = self._resolver.entry(schedule, Weekday.of(day))
            result = self._classifier.classify(
                day,
                entry,
                punch_lookup(employee_id, day),
                absence_lookup(employee_id, day),
                now=now,
            )
            results.append(result)
            positive += max(result.balance_seconds, 0)
            negative += max(-result.balance_seconds, 0)

        return PeriodSummary(
            employee_id=employee_id,
            start_date=requested_start,
            end_date=requested_end,
            granularity=granularity,
            daily_results=tuple(results),
            total_positive_seconds=positive,
            total_negative_seconds=negative,
        )
