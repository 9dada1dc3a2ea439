from datetime import date, timedelta

from src.timebank.timebank.balance.aggregator import BalanceAggregator
from src.timebank.timebank.core.enums import DayCategory
from src.timebank.timebank.punches.model import PunchRecord

WEEK_START = date(2025, 6, 9)
WEEK_END = date(2025, 6, 13)


def _full_day(at, day, out="18:00"):
    return PunchRecord(
        employee_id=1,
        work_date=day,
        clock_in=at(day, "08:00"),
        lunch_start=at(day, "12:00"),
        lunch_end=at(day, "13:00"),
        clock_out=at(day, out),
    )


def _no_absence(_emp, _day):
    return None


def test_five_days_of_one_hour_overtime(tz, schedule, at, fixed_now):
    punches = {WEEK_START + timedelta(days=i): _full_day(at, WEEK_START + timedelta(days=i)) for i in range(5)}

    summary = BalanceAggregator(tz).aggregate(
        1, WEEK_START, WEEK_END, schedule, lambda _e, d: punches.get(d), _no_absence, date(2025, 1, 1), now=fixed_now
    )

    assert summary.total_positive_seconds == 5 * 3600
    assert summary.total_negative_seconds == 0
    assert summary.final_balance_seconds == 5 * 3600
    assert summary.to_dict(tz)["finalBalance"] == "05:00:00"


def test_results_are_ascending_and_totals_match_days(tz, schedule, at, fixed_now):
    start = date(2025, 6, 1)
    punches = {
        date(2025, 6, 2): _full_day(at, date(2025, 6, 2), out="19:00"),
        date(2025, 6, 3): _full_day(at, date(2025, 6, 3), out="16:00"),
    }

    summary = BalanceAggregator(tz).aggregate(
        1, start, WEEK_END, schedule, lambda _e, d: punches.get(d), _no_absence, date(2025, 1, 1), now=fixed_now
    )

    days = [r.work_date for r in summary.daily_results]
    assert days == sorted(days)
    assert days[0] == start and days[-1] == WEEK_END
    assert summary.total_positive_seconds == sum(max(r.balance_seconds, 0) for r in summary.daily_results)
    assert summary.total_negative_seconds == sum(max(-r.balance_seconds, 0) for r in summary.daily_results)
    assert summary.total_positive_seconds >= 0 and summary.total_negative_seconds >= 0
    assert summary.final_balance_seconds == summary.total_positive_seconds - summary.total_negative_seconds


def test_future_dates_are_never_emitted(tz, schedule, fixed_now):
    summary = BalanceAggregator(tz).aggregate(
        1, WEEK_START, date(2025, 6, 30), schedule, _no_absence, _no_absence, date(2025, 1, 1), now=fixed_now
    )

    assert summary.daily_results[-1].work_date == fixed_now.date()
    assert summary.end_date == date(2025, 6, 30)


def test_days_before_employment_start_are_skipped(tz, schedule, fixed_now):
    summary = BalanceAggregator(tz).aggregate(
        1, date(2025, 6, 1), WEEK_END, schedule, _no_absence, _no_absence, WEEK_START, now=fixed_now
    )

    assert summary.daily_results[0].work_date == WEEK_START
    assert summary.total_negative_seconds == 5 * 8 * 3600


def test_window_entirely_in_future_is_empty(tz, schedule, fixed_now):
    summary = BalanceAggregator(tz).aggregate(
        1, date(2025, 7, 1), date(2025, 7, 31), schedule, _no_absence, _no_absence, date(2025, 1, 1), now=fixed_now
    )

    assert summary.daily_results == ()
    assert summary.final_balance_seconds == 0
    assert summary.to_dict(tz)["finalBalance"] == "00:00:00"


def test_weekend_days_are_day_off(tz, schedule, fixed_now):
    summary = BalanceAggregator(tz).aggregate(
        1, date(2025, 6, 7), date(2025, 6, 8), schedule, _no_absence, _no_absence, date(2025, 1, 1), now=fixed_now
    )

    assert [r.category for r in summary.daily_results] == [DayCategory.DAY_OFF, DayCategory.DAY_OFF]
    assert summary.final_balance_seconds == 0
