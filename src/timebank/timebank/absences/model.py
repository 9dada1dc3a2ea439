from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AbsenceType


@dataclass(frozen=True)
class AbsenceRecord:
    """Domain entity: a registered absence for one employee and date."""

    employee_id: int
    work_date: date
    type: AbsenceType
    description: Optional[str] = None
    created_by: Optional[int] = None
    absence_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "absenceId": self.absence_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "type": self.type.value,
            "description": self.description,
            "createdBy": self.created_by,
        }
