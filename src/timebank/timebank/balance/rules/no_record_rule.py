from __future__ import annotations

from ...core.enums import BalanceLabel, DayCategory
from ..model import DayResult
from .base import DayContext, DayRule


class NoRecordRule(DayRule):
    """Working day with neither punches nor absence: the whole day is owed."""

    def decide(self, ctx: DayContext) -> DayResult:
        return DayResult(
            work_date=ctx.work_date,
            category=DayCategory.NO_RECORD,
            worked_seconds=0,
            expected_seconds=ctx.expected_seconds,
            balance_seconds=-ctx.expected_seconds,
            status_label=BalanceLabel.NO_RECORD.value,
        )
