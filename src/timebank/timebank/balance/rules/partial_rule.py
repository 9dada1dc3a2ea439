from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.datetime_utils import seconds_between
from ...core.enums import BalanceLabel, DayCategory
from ..model import DayResult
from .base import DayContext, DayRule


class PartialRule(DayRule):
    """Some punches missing: count what the present timestamps prove.

    Morning segment is clock-in to lunch start. The afternoon segment starts
    at lunch end (or at clock-in when there was no lunch) and ends at
    clock-out; an open segment on the current day runs until now, on any
    earlier day it counts nothing. The balance is signed against the full
    expected day.
    """

    def decide(self, ctx: DayContext) -> DayResult:
        p = ctx.punch
        if p is None or p.is_empty or p.is_complete:
            raise ValueError("PartialRule requires a partially filled punch record")

        worked = 0
        if p.clock_in is not None:
            open_end: Optional[datetime] = p.clock_out or (ctx.now if ctx.is_today else None)
            if p.lunch_start is not None:
                worked += self._segment(p.clock_in, p.lunch_start)
                if p.lunch_end is not None:
                    worked += self._segment(p.lunch_end, open_end)
            else:
                worked += self._segment(p.clock_in, open_end)

        return DayResult(
            work_date=ctx.work_date,
            category=DayCategory.PARTIAL,
            worked_seconds=worked,
            expected_seconds=ctx.expected_seconds,
            balance_seconds=worked - ctx.expected_seconds,
            status_label=BalanceLabel.INCOMPLETE.value,
            punch=p,
        )

    @staticmethod
    def _segment(start: datetime, end: Optional[datetime]) -> int:
        if end is None:
            return 0
        return max(seconds_between(start, end), 0)
