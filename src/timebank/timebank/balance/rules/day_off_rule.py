from __future__ import annotations

from ...core.enums import BalanceLabel, DayCategory
from ..model import DayResult
from .base import DayContext, DayRule


class DayOffRule(DayRule):
    """Weekday without an entry, or flagged as a day off: nothing expected, nothing owed."""

    def decide(self, ctx: DayContext) -> DayResult:
        return DayResult(
            work_date=ctx.work_date,
            category=DayCategory.DAY_OFF,
            worked_seconds=0,
            expected_seconds=0,
            balance_seconds=0,
            status_label=BalanceLabel.DAY_OFF.value,
            punch=ctx.punch,
        )
