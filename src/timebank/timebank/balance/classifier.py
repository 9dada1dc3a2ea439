from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Optional

from ..absences.model import AbsenceRecord
from ..common.datetime_utils import to_local
from ..core.enums import DayCategory
from ..punches.model import PunchRecord
from ..schedules.model import WeekDaySchedule
from ..schedules.resolver import ScheduleResolver
from .model import DayResult
from .rules.absence_rule import AbsenceRule
from .rules.base import DayContext, DayRule
from .rules.complete_rule import CompleteRule
from .rules.day_off_rule import DayOffRule
from .rules.no_record_rule import NoRecordRule
from .rules.partial_rule import PartialRule


@dataclass
class DayRuleFactory:
    """Factory Pattern: pick the rule for a day, first match wins.

    Order: day off, absence, complete punches, partial punches, no record.
    """

    rules: dict[DayCategory, DayRule] = field(
        default_factory=lambda: {
            DayCategory.DAY_OFF: DayOffRule(),
            DayCategory.ABSENCE: AbsenceRule(),
            DayCategory.COMPLETE: CompleteRule(),
            DayCategory.PARTIAL: PartialRule(),
            DayCategory.NO_RECORD: NoRecordRule(),
        }
    )

    @staticmethod
    def category_for(ctx: DayContext) -> DayCategory:
        if not ScheduleResolver.is_working_entry(ctx.entry):
            return DayCategory.DAY_OFF
        if ctx.absence is not None:
            return DayCategory.ABSENCE
        if ctx.punch is None or ctx.punch.is_empty:
            return DayCategory.NO_RECORD
        if ctx.punch.is_complete:
            return DayCategory.COMPLETE
        return DayCategory.PARTIAL

    def for_day(self, ctx: DayContext) -> DayRule:
        return self.rules[self.category_for(ctx)]


class DayClassifier:
    def __init__(
        self,
        tz: tzinfo,
        *,
        resolver: ScheduleResolver | None = None,
        rule_factory: DayRuleFactory | None = None,
    ):
        self._tz = tz
        self._resolver = resolver or ScheduleResolver()
        self._factory = rule_factory or DayRuleFactory()

    def classify(
        self,
        work_date: date,
        entry: Optional[WeekDaySchedule],
        punch: Optional[PunchRecord] = None,
        absence: Optional[AbsenceRecord] = None,
        *,
        now: datetime,
    ) -> DayResult:
        ctx = DayContext(
            work_date=work_date,
            entry=entry,
            expected_seconds=self._resolver.expected_for_entry(entry),
            now=to_local(now, self._tz),
            punch=punch,
            absence=absence,
        )
        return self._factory.for_day(ctx).decide(ctx)
