from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Optional

from ..common.duration import format_duration
from ..core.enums import AbsenceType, BalanceLabel, DayCategory, Granularity
from ..punches.model import PunchRecord

STATUS_DESCRIPTIONS = {
    BalanceLabel.DAY_OFF.value: "Day off",
    BalanceLabel.EXACT.value: "Full shift",
    BalanceLabel.OVERTIME.value: "Overtime",
    BalanceLabel.SHORTFALL.value: "Missing hours",
    BalanceLabel.INCOMPLETE.value: "Incomplete shift",
    BalanceLabel.NO_RECORD.value: "No record",
    AbsenceType.VACATION.value: "Vacation",
    AbsenceType.SICK_LEAVE.value: "Sick leave",
    AbsenceType.JUSTIFIED.value: "Justified absence",
    AbsenceType.UNJUSTIFIED.value: "Unjustified absence",
    AbsenceType.HOLIDAY.value: "Holiday",
    AbsenceType.DAY_OFF.value: "Day off granted",
}


@dataclass(frozen=True)
class DayResult:
    """Read-model: how one calendar day settles against the schedule."""

    work_date: date
    category: DayCategory
    worked_seconds: int
    expected_seconds: int
    balance_seconds: int
    status_label: str
    absence_type: Optional[AbsenceType] = None
    punch: Optional[PunchRecord] = None

    def to_dict(self, tz: tzinfo) -> dict:
        punch = self.punch.to_dict(tz) if self.punch else {}
        return {
            "date": self.work_date.isoformat(),
            "category": self.category.value,
            "status": self.status_label,
            "description": STATUS_DESCRIPTIONS.get(self.status_label, self.status_label),
            "absenceType": self.absence_type.value if self.absence_type else None,
            "clockIn": punch.get("clockIn"),
            "lunchStart": punch.get("lunchStart"),
            "lunchEnd": punch.get("lunchEnd"),
            "clockOut": punch.get("clockOut"),
            "workedHours": format_duration(self.worked_seconds),
            "expectedHours": format_duration(self.expected_seconds),
            "balance": format_duration(self.balance_seconds),
            "workedSeconds": self.worked_seconds,
            "expectedSeconds": self.expected_seconds,
            "balanceSeconds": self.balance_seconds,
        }


@dataclass(frozen=True)
class PeriodSummary:
    """Read-model: day results of a window plus the signed totals.

    ``daily_results`` is ordered by date, ascending.
    """

    employee_id: int
    start_date: date
    end_date: date
    granularity: Optional[Granularity]
    daily_results: tuple[DayResult, ...] = field(default_factory=tuple)
    total_positive_seconds: int = 0
    total_negative_seconds: int = 0

    @property
    def final_balance_seconds(self) -> int:
        return self.total_positive_seconds - self.total_negative_seconds

    def to_dict(self, tz: tzinfo) -> dict:
        return {
            "employeeId": self.employee_id,
            "period": {
                "startDate": self.start_date.isoformat(),
                "endDate": self.end_date.isoformat(),
                "type": self.granularity.value if self.granularity else None,
            },
            "records": [r.to_dict(tz) for r in self.daily_results],
            "totalPositiveHours": format_duration(self.total_positive_seconds),
            "totalNegativeHours": format_duration(self.total_negative_seconds),
            "finalBalance": format_duration(self.final_balance_seconds),
            "totalPositiveSeconds": self.total_positive_seconds,
            "totalNegativeSeconds": self.total_negative_seconds,
            "finalBalanceSeconds": self.final_balance_seconds,
        }
