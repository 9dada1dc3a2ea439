from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Employee:
    """Domain entity: the parts of an employee the time balance needs.

    Employee CRUD lives outside this package.
    """

    employee_id: int
    full_name: str
    employment_start_date: date
    is_active: bool = True
