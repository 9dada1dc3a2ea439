from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import now_local, seconds_between, to_local
from ..common.duration import format_duration
from ..core.constants import DEFAULT_LUNCH_BREAK_MINUTES, SECONDS_PER_MINUTE
from ..core.enums import PunchField, Weekday
from ..core.exceptions import ConflictError, NotFoundError, PolicyViolation, ValidationError
from ..schedules.model import WeekDaySchedule
from ..schedules.repository import ScheduleRepository
from ..schedules.resolver import ScheduleResolver
from .model import Location, PunchRecord
from .repository import PunchRepository

logger = logging.getLogger(__name__)

_ALREADY_RECORDED = {
    PunchField.LUNCH_START: "Lunch break already started today",
    PunchField.LUNCH_END: "Return from lunch already recorded today",
    PunchField.CLOCK_OUT: "Shift already finished today",
}


class PunchService:
    """Records the four daily punches.

    Every write is a conditional write in the repository, so two concurrent
    requests for the same punch cannot both succeed.
    """

    def __init__(
        self,
        punches: PunchRepository,
        schedules: ScheduleRepository,
        *,
        tz: tzinfo,
        resolver: ScheduleResolver | None = None,
        default_lunch_break_minutes: int = DEFAULT_LUNCH_BREAK_MINUTES,
    ):
        self._punches = punches
        self._schedules = schedules
        self._tz = tz
        self._resolver = resolver or ScheduleResolver()
        self._default_lunch_break_seconds = int(default_lunch_break_minutes) * SECONDS_PER_MINUTE

    def _local_now(self, now: Optional[datetime]) -> datetime:
        return to_local(now, self._tz) if now else now_local(self._tz)

    def _entry_for(self, employee_id: int, work_date: date) -> Optional[WeekDaySchedule]:
        schedule = self._schedules.get_for_employee(int(employee_id))
        if not schedule:
            raise NotFoundError("Work schedule not found for this employee")
        return self._resolver.entry(schedule, Weekday.of(work_date))

    def clock_in(
        self,
        employee_id: int,
        *,
        location: Optional[Location] = None,
        now: Optional[datetime] = None,
    ) -> PunchRecord:
        now = self._local_now(now)
        today = now.date()

        entry = self._entry_for(employee_id, today)
        if not self._resolver.is_working_entry(entry):
            raise PolicyViolation("Today is a day off or has no schedule")
        if now.time() < entry.start:
            raise PolicyViolation("Clocking in before the start of the shift is not allowed")

        try:
            record = self._punches.insert_clock_in(
                employee_id=int(employee_id),
                work_date=today,
                timestamp=now,
                location=location,
            )
        except ConflictError:
            logger.warning("Rejected duplicate clock-in for employee %s on %s", employee_id, today)
            raise

        logger.info("Clock-in recorded for employee %s on %s at %s", employee_id, today, now.isoformat())
        return record

    def start_lunch(self, employee_id: int, *, now: Optional[datetime] = None) -> PunchRecord:
        return self._record(employee_id, PunchField.LUNCH_START, now=now)

    def end_lunch(self, employee_id: int, *, now: Optional[datetime] = None) -> PunchRecord:
        return self._record(employee_id, PunchField.LUNCH_END, now=now)

    def clock_out(self, employee_id: int, *, now: Optional[datetime] = None) -> PunchRecord:
        return self._record(employee_id, PunchField.CLOCK_OUT, now=now)

    def today_record(self, employee_id: int, *, now: Optional[datetime] = None) -> Optional[PunchRecord]:
        return self._punches.get_for_employee_and_date(int(employee_id), self._local_now(now).date())

    def _record(self, employee_id: int, punch_field: PunchField, *, now: Optional[datetime]) -> PunchRecord:
        now = self._local_now(now)
        today = now.date()

        record = self._punches.get_for_employee_and_date(int(employee_id), today)
        if not record or record.clock_in is None:
            raise NotFoundError("No clock-in recorded today")
        if record.timestamp(punch_field) is not None:
            raise ConflictError(_ALREADY_RECORDED[punch_field])

        if punch_field is PunchField.LUNCH_END:
            if record.lunch_start is None:
                raise ValidationError("Lunch break has not been started")
            self._check_lunch_break(employee_id, record, now)

        # Raises ValidationError when the new punch would go back in time.
        updated = record.with_timestamp(punch_field, now)

        if not self._punches.set_timestamp(
            employee_id=int(employee_id),
            work_date=today,
            punch_field=punch_field,
            timestamp=now,
        ):
            logger.warning("Rejected concurrent %s for employee %s on %s", punch_field.value, employee_id, today)
            raise ConflictError(_ALREADY_RECORDED[punch_field])

        logger.info("%s recorded for employee %s on %s", punch_field.value, employee_id, today)
        return updated

    def _check_lunch_break(self, employee_id: int, record: PunchRecord, now: datetime) -> None:
        entry = self._entry_for(employee_id, record.work_date)
        minimum = self._default_lunch_break_seconds
        if entry is not None and entry.expected_lunch_break_seconds:
            minimum = entry.expected_lunch_break_seconds

        elapsed = seconds_between(record.lunch_start, now)
        if elapsed < minimum:
            logger.warning(
                "Lunch break too short for employee %s: %s of %s",
                employee_id,
                format_duration(elapsed),
                format_duration(minimum),
            )
            raise PolicyViolation(f"Minimum lunch break is {minimum // SECONDS_PER_MINUTE} minutes")
