from __future__ import annotations

from ...core.enums import DayCategory
from ..model import DayResult
from .base import DayContext, DayRule


class AbsenceRule(DayRule):
    """Registered absence.

    Unjustified absences owe the whole expected day. Every other type counts
    the expected time as worked, so the day is neutral.
    """

    def decide(self, ctx: DayContext) -> DayResult:
        absence = ctx.absence
        if absence is None:
            raise ValueError("AbsenceRule requires an absence")

        if absence.type.is_excused:
            worked, balance = ctx.expected_seconds, 0
        else:
            worked, balance = 0, -ctx.expected_seconds

        return DayResult(
            work_date=ctx.work_date,
            category=DayCategory.ABSENCE,
            worked_seconds=worked,
            expected_seconds=ctx.expected_seconds,
            balance_seconds=balance,
            status_label=absence.type.value,
            absence_type=absence.type,
            punch=ctx.punch,
        )
