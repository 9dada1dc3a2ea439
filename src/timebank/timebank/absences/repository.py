from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AbsenceRecord


class AbsenceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AbsenceRecord]:
        raise NotImplementedError

    def list_range(self, employee_id: int, start: date, end: date) -> Sequence[AbsenceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AbsenceRecord]:
        raise NotImplementedError

    def upsert(self, absence: AbsenceRecord) -> AbsenceRecord:
        """Create the absence or update type/description of the existing one for that date."""

        raise NotImplementedError
