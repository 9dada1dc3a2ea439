from datetime import date

import pytest

from src.timebank.timebank.absences.model import AbsenceRecord
from src.timebank.timebank.core.enums import AbsenceType, DayCategory
from src.timebank.timebank.core.exceptions import InvalidWindowError, NotFoundError
from src.timebank.timebank.punches.model import PunchRecord
from src.timebank.timebank.schedules.model import WorkSchedule


def test_week_summary_combines_punches_and_absences(container, punches_repo, absences_repo, at, fixed_now, tz):
    monday = date(2025, 6, 9)
    punches_repo.add(
        PunchRecord(
            employee_id=1,
            work_date=monday,
            clock_in=at(monday, "08:00"),
            lunch_start=at(monday, "12:00"),
            lunch_end=at(monday, "13:00"),
            clock_out=at(monday, "19:00"),
        )
    )
    absences_repo.upsert(AbsenceRecord(employee_id=1, work_date=date(2025, 6, 10), type=AbsenceType.VACATION))
    absences_repo.upsert(AbsenceRecord(employee_id=1, work_date=date(2025, 6, 11), type=AbsenceType.UNJUSTIFIED))

    summary = container.balance_service.summary(1, granularity="week", now=fixed_now)

    # Sunday..Friday is emitted, Saturday 14th is still in the future
    assert [r.work_date.day for r in summary.daily_results] == [8, 9, 10, 11, 12, 13]
    categories = {r.work_date.day: r.category for r in summary.daily_results}
    assert categories[8] is DayCategory.DAY_OFF
    assert categories[9] is DayCategory.COMPLETE
    assert categories[10] is DayCategory.ABSENCE
    assert categories[12] is DayCategory.NO_RECORD

    assert summary.total_positive_seconds == 2 * 3600
    # unjustified wednesday plus thursday and friday without records
    assert summary.total_negative_seconds == 3 * 8 * 3600
    payload = summary.to_dict(tz)
    assert payload["period"] == {"startDate": "2025-06-08", "endDate": "2025-06-14", "type": "week"}
    assert payload["finalBalance"] == "-22:00:00"


def test_explicit_range(container, fixed_now):
    summary = container.balance_service.summary(1, start="2025-06-02", end="2025-06-06", now=fixed_now)
    assert summary.final_balance_seconds == -5 * 8 * 3600
    assert summary.granularity is None


def test_unknown_employee_or_schedule(container, schedules_repo, schedule, fixed_now):
    with pytest.raises(NotFoundError):
        container.balance_service.summary(2, granularity="day", now=fixed_now)

    schedules_repo.replace(WorkSchedule(employee_id=3, days=schedule.days))
    with pytest.raises(NotFoundError):
        container.balance_service.summary(3, granularity="day", now=fixed_now)


def test_window_errors_propagate(container, fixed_now):
    with pytest.raises(InvalidWindowError):
        container.balance_service.summary(1, granularity="decade", now=fixed_now)
