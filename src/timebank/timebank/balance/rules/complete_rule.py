from __future__ import annotations

from ...common.datetime_utils import seconds_between
from ...core.enums import BalanceLabel, DayCategory
from ..model import DayResult
from .base import DayContext, DayRule


class CompleteRule(DayRule):
    """All four punches present: (out - in) - (lunch end - lunch start)."""

    def decide(self, ctx: DayContext) -> DayResult:
        p = ctx.punch
        if p is None or not p.is_complete:
            raise ValueError("CompleteRule requires a complete punch record")

        worked = seconds_between(p.clock_in, p.clock_out) - seconds_between(p.lunch_start, p.lunch_end)
        balance = worked - ctx.expected_seconds

        if balance > 0:
            label = BalanceLabel.OVERTIME
        elif balance < 0:
            label = BalanceLabel.SHORTFALL
        else:
            label = BalanceLabel.EXACT

        return DayResult(
            work_date=ctx.work_date,
            category=DayCategory.COMPLETE,
            worked_seconds=worked,
            expected_seconds=ctx.expected_seconds,
            balance_seconds=balance,
            status_label=label.value,
            punch=p,
        )
