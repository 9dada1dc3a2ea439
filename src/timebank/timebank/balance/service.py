from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional

from ..absences.repository import AbsenceRepository
from ..common.datetime_utils import now_local, to_local
from ..common.duration import format_duration
from ..core.enums import Granularity
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..punches.repository import PunchRepository
from ..schedules.repository import ScheduleRepository
from .aggregator import BalanceAggregator
from .model import PeriodSummary
from .window import PeriodWindowBuilder, parse_granularity

logger = logging.getLogger(__name__)


class BalanceService:
    """Fetches schedule, punches and absences and hands them to the aggregator.

    Results are computed on every call; nothing is cached because punches
    and absences keep changing.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        punches: PunchRepository,
        absences: AbsenceRepository,
        employees: EmployeeRepository,
        *,
        tz: tzinfo,
        window_builder: PeriodWindowBuilder | None = None,
        aggregator: BalanceAggregator | None = None,
    ):
        self._schedules = schedules
        self._punches = punches
        self._absences = absences
        self._employees = employees
        self._tz = tz
        self._windows = window_builder or PeriodWindowBuilder(tz)
        self._aggregator = aggregator or BalanceAggregator(tz)

    def summary(
        self,
        employee_id: int,
        *,
        start: "date | str | None" = None,
        end: "date | str | None" = None,
        granularity: "Granularity | str | None" = None,
        now: Optional[datetime] = None,
    ) -> PeriodSummary:
        now = to_local(now, self._tz) if now else now_local(self._tz)
        period = parse_granularity(granularity)
        window_start, window_end = self._windows.build_window(start, end, period, now=now)

        schedule = self._schedules.get_for_employee(int(employee_id))
        if not schedule:
            raise NotFoundError("Work schedule not found for this employee")

        employment_start = self._employees.get_employment_start_date(int(employee_id))
        if employment_start is None:
            raise NotFoundError("Employee not found")

        fetch_start, fetch_end = self._aggregator.effective_range(window_start, window_end, employment_start, now=now)
        punches = {}
        absences = {}
        if fetch_start <= fetch_end:
            punches = {p.work_date: p for p in self._punches.list_range(int(employee_id), fetch_start, fetch_end)}
            absences = {a.work_date: a for a in self._absences.list_range(int(employee_id), fetch_start, fetch_end)}

        result = self._aggregator.aggregate(
            int(employee_id),
            window_start,
            window_end,
            schedule,
            lambda _emp, day: punches.get(day),
            lambda _emp, day: absences.get(day),
            employment_start,
            now=now,
            granularity=period,
        )
        logger.debug(
            "Balance for employee %s %s..%s: %d days, +%s -%s = %s",
            employee_id,
            window_start,
            window_end,
            len(result.daily_results),
            format_duration(result.total_positive_seconds),
            format_duration(result.total_negative_seconds),
            format_duration(result.final_balance_seconds),
        )
        return result
