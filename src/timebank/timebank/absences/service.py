from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Sequence

from ..balance.classifier import DayClassifier
from ..common.datetime_utils import now_local, to_local
from ..core.enums import AbsenceType, DayCategory, Weekday
from ..core.exceptions import NotFoundError, PolicyViolation, ValidationError
from ..employees.repository import EmployeeRepository
from ..punches.repository import PunchRepository
from ..schedules.repository import ScheduleRepository
from .model import AbsenceRecord
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


class AbsenceService:
    def __init__(
        self,
        absences: AbsenceRepository,
        employees: EmployeeRepository,
        schedules: ScheduleRepository,
        punches: PunchRepository,
        *,
        tz: tzinfo,
        classifier: DayClassifier | None = None,
    ):
        self._absences = absences
        self._employees = employees
        self._schedules = schedules
        self._punches = punches
        self._tz = tz
        self._classifier = classifier or DayClassifier(tz)

    @staticmethod
    def _parse_type(value: "AbsenceType | str") -> AbsenceType:
        if isinstance(value, AbsenceType):
            return value
        try:
            return AbsenceType(str(value or "").strip().lower())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in AbsenceType)
            raise ValidationError(f"Invalid absence type {value!r}. Use one of: {allowed}") from exc

    def register(
        self,
        *,
        employee_id: int,
        work_date: date,
        absence_type: "AbsenceType | str",
        description: Optional[str] = None,
        created_by: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> AbsenceRecord:
        """Create or update the absence of one past date.

        Rejected when the date precedes the employment start, is today or
        later, or already holds a complete shift that met the expected hours.
        """

        kind = self._parse_type(absence_type)
        now = to_local(now, self._tz) if now else now_local(self._tz)

        employee = self._employees.get_by_id(int(employee_id))
        if employee is None:
            raise NotFoundError("Employee not found")
        employment_start = employee.employment_start_date
        if work_date < employment_start:
            raise PolicyViolation(
                f"Absences cannot be registered before the employment start ({employment_start:%d/%m/%Y})"
            )

        schedule = self._schedules.get_for_employee(int(employee_id))
        if not schedule:
            raise NotFoundError("Work schedule not found for this employee")

        if work_date >= now.date():
            raise PolicyViolation("Absences can only be registered for past dates")

        punch = self._punches.get_for_employee_and_date(int(employee_id), work_date)
        if punch is not None and punch.is_complete:
            day = self._classifier.classify(
                work_date,
                schedule.entry_for(Weekday.of(work_date)),
                punch,
                None,
                now=now,
            )
            if day.category is DayCategory.COMPLETE and day.balance_seconds >= 0:
                logger.warning("Refused absence over a complete shift: employee %s on %s", employee_id, work_date)
                raise PolicyViolation("A complete shift with no missing hours cannot be justified")

        note = (description or "").strip() or None
        stored = self._absences.upsert(
            AbsenceRecord(
                employee_id=int(employee_id),
                work_date=work_date,
                type=kind,
                description=note,
                created_by=int(created_by) if created_by is not None else None,
            )
        )
        logger.info("Absence %s registered for employee %s on %s", kind.value, employee_id, work_date)
        return stored

    def list_for_employee(self, employee_id: int) -> Sequence[AbsenceRecord]:
        return self._absences.list_for_employee(int(employee_id))
