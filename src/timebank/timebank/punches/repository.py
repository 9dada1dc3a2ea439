from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchField
from .model import Location, PunchRecord


class PunchRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[PunchRecord]:
        raise NotImplementedError

    def list_range(self, employee_id: int, start: date, end: date) -> Sequence[PunchRecord]:
        """Punch records with start <= work_date <= end, ordered by work_date."""

        raise NotImplementedError

    def insert_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        timestamp: datetime,
        location: Optional[Location] = None,
    ) -> PunchRecord:
        """Atomically create the day's record.

        Must raise ConflictError when a record for (employee_id, work_date)
        already exists, including when another request created it
        concurrently. A read followed by a write is not enough.
        """

        raise NotImplementedError

    def set_timestamp(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_field: PunchField,
        timestamp: datetime,
    ) -> bool:
        """Set one timestamp only if it is still empty.

        Returns False when the record is missing or the field was already set.
        """

        raise NotImplementedError
