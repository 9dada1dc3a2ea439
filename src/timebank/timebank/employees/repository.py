from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_employment_start_date(self, employee_id: int) -> Optional[date]:
        raise NotImplementedError
