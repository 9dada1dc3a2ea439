from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import to_local
from ..core.enums import PunchField
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PunchRecord:
    """Domain entity: the punches of one employee on one date.

    Created on the first clock-in of the day and filled in by the later
    punches. Any subset of the four timestamps may be missing while the day
    is in progress, but the ones present never go backwards.
    """

    employee_id: int
    work_date: date
    clock_in: Optional[datetime] = None
    lunch_start: Optional[datetime] = None
    lunch_end: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    location: Optional[Location] = None
    record_id: Optional[int] = None

    def __post_init__(self) -> None:
        previous: Optional[tuple[PunchField, datetime]] = None
        for f in PunchField:
            value = self.timestamp(f)
            if value is None:
                continue
            if previous is not None and value < previous[1]:
                raise ValidationError(f"{f.value} cannot be earlier than {previous[0].value}")
            previous = (f, value)

    def timestamp(self, punch_field: PunchField) -> Optional[datetime]:
        return getattr(self, punch_field.value)

    def present_fields(self) -> list[PunchField]:
        return [f for f in PunchField if self.timestamp(f) is not None]

    @property
    def is_complete(self) -> bool:
        return len(self.present_fields()) == len(PunchField)

    @property
    def is_empty(self) -> bool:
        return not self.present_fields()

    def with_timestamp(self, punch_field: PunchField, value: datetime) -> "PunchRecord":
        return replace(self, **{punch_field.value: value})

    def to_dict(self, tz: tzinfo) -> dict:
        def _fmt(v: Optional[datetime]) -> Optional[str]:
            return to_local(v, tz).isoformat() if v else None

        return {
            "recordId": self.record_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "clockIn": _fmt(self.clock_in),
            "lunchStart": _fmt(self.lunch_start),
            "lunchEnd": _fmt(self.lunch_end),
            "clockOut": _fmt(self.clock_out),
            "location": (
                {"latitude": self.location.latitude, "longitude": self.location.longitude}
                if self.location
                else None
            ),
        }
