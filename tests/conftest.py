from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.timebank.timebank.absences.model import AbsenceRecord
from src.timebank.timebank.container import assemble
from src.timebank.timebank.core.enums import PunchField, Weekday
from src.timebank.timebank.core.exceptions import ConflictError
from src.timebank.timebank.employees.model import Employee
from src.timebank.timebank.punches.model import Location, PunchRecord
from src.timebank.timebank.schedules.model import WeekDaySchedule, WorkSchedule

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


class InMemorySchedules:
    def __init__(self, schedules: Optional[dict[int, WorkSchedule]] = None):
        self._by_employee = dict(schedules or {})

    def get_for_employee(self, employee_id: int) -> Optional[WorkSchedule]:
        return self._by_employee.get(employee_id)

    def replace(self, schedule: WorkSchedule) -> None:
        self._by_employee[schedule.employee_id] = schedule


class InMemoryPunches:
    """Punch store whose writes are atomic under a lock, like the unique key in MySQL."""

    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], PunchRecord] = {}
        self._lock = threading.Lock()
        self._id = 0

    def add(self, record: PunchRecord) -> None:
        self._by_employee_date[(record.employee_id, record.work_date)] = record

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[PunchRecord]:
        return self._by_employee_date.get((employee_id, work_date))

    def list_range(self, employee_id: int, start: date, end: date):
        items = [
            r for (emp, d), r in self._by_employee_date.items() if emp == employee_id and start <= d <= end
        ]
        return sorted(items, key=lambda r: r.work_date)

    def insert_clock_in(self, *, employee_id: int, work_date: date, timestamp: datetime, location: Optional[Location] = None):
        with self._lock:
            if (employee_id, work_date) in self._by_employee_date:
                raise ConflictError("Already clocked in today")
            self._id += 1
            rec = PunchRecord(
                record_id=self._id,
                employee_id=employee_id,
                work_date=work_date,
                clock_in=timestamp,
                location=location,
            )
            self._by_employee_date[(employee_id, work_date)] = rec
            return rec

    def set_timestamp(self, *, employee_id: int, work_date: date, punch_field: PunchField, timestamp: datetime) -> bool:
        with self._lock:
            rec = self._by_employee_date.get((employee_id, work_date))
            if rec is None or rec.timestamp(punch_field) is not None:
                return False
            self._by_employee_date[(employee_id, work_date)] = rec.with_timestamp(punch_field, timestamp)
            return True


class InMemoryAbsences:
    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], AbsenceRecord] = {}
        self._id = 0

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AbsenceRecord]:
        return self._by_employee_date.get((employee_id, work_date))

    def list_range(self, employee_id: int, start: date, end: date):
        items = [
            a for (emp, d), a in self._by_employee_date.items() if emp == employee_id and start <= d <= end
        ]
        return sorted(items, key=lambda a: a.work_date)

    def list_for_employee(self, employee_id: int):
        items = [a for (emp, _), a in self._by_employee_date.items() if emp == employee_id]
        return sorted(items, key=lambda a: a.work_date, reverse=True)

    def upsert(self, absence: AbsenceRecord) -> AbsenceRecord:
        key = (absence.employee_id, absence.work_date)
        existing = self._by_employee_date.get(key)
        if existing:
            stored = replace(existing, type=absence.type, description=absence.description)
        else:
            self._id += 1
            stored = replace(absence, absence_id=self._id)
        self._by_employee_date[key] = stored
        return stored


class InMemoryEmployees:
    def __init__(self, start_dates: Optional[dict[int, date]] = None):
        self._start_dates = dict(start_dates or {})

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        start = self._start_dates.get(employee_id)
        if start is None:
            return None
        return Employee(employee_id=employee_id, full_name=f"Employee {employee_id}", employment_start_date=start)

    def get_employment_start_date(self, employee_id: int) -> Optional[date]:
        return self._start_dates.get(employee_id)


def office_schedule(employee_id: int = 1) -> WorkSchedule:
    """Monday to Friday 08:00-17:00 with a one hour lunch (8h expected), Saturday off, no Sunday entry."""

    workdays = [Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY]
    entries = [
        WeekDaySchedule(
            weekday=d,
            start=time(8, 0),
            end=time(17, 0),
            has_lunch=True,
            expected_lunch_break_seconds=3600,
        )
        for d in workdays
    ]
    entries.append(WeekDaySchedule(weekday=Weekday.SATURDAY, is_day_off=True))
    return WorkSchedule.from_entries(employee_id, entries)


@pytest.fixture
def tz():
    return SAO_PAULO


@pytest.fixture
def fixed_now():
    # Friday 2025-06-13, 18:00 in Sao Paulo
    return datetime(2025, 6, 13, 18, 0, 0, tzinfo=SAO_PAULO)


@pytest.fixture
def at():
    def _at(day: date, hhmm: str) -> datetime:
        h, m = (int(x) for x in hhmm.split(":"))
        return datetime(day.year, day.month, day.day, h, m, tzinfo=SAO_PAULO)

    return _at


@pytest.fixture
def schedule():
    return office_schedule()


@pytest.fixture
def schedules_repo(schedule):
    return InMemorySchedules({1: schedule})


@pytest.fixture
def punches_repo():
    return InMemoryPunches()


@pytest.fixture
def absences_repo():
    return InMemoryAbsences()


@pytest.fixture
def employees_repo():
    return InMemoryEmployees({1: date(2025, 1, 1)})


@pytest.fixture
def container(schedules_repo, punches_repo, absences_repo, employees_repo, tz):
    return assemble(
        schedules_repo=schedules_repo,
        punches_repo=punches_repo,
        absences_repo=absences_repo,
        employees_repo=employees_repo,
        tz=tz,
    )
