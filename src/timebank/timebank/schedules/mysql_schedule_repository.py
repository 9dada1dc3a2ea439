from __future__ import annotations

from typing import Optional

from ..core.enums import Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_time_of_day
from .model import WeekDaySchedule, WorkSchedule
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, weekday, start_time, end_time, has_lunch, lunch_break_seconds, is_day_off
                FROM work_schedule_days
                WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            rows = fetchall(cur)
            if not rows:
                return None
            return WorkSchedule.from_entries(
                int(employee_id),
                (
                    WeekDaySchedule(
                        weekday=Weekday.parse(r["weekday"]),
                        start=to_time_of_day(r.get("start_time")),
                        end=to_time_of_day(r.get("end_time")),
                        has_lunch=bool(r["has_lunch"]),
                        expected_lunch_break_seconds=int(r.get("lunch_break_seconds") or 0),
                        is_day_off=bool(r["is_day_off"]),
                    )
                    for r in rows
                ),
            )

    def replace(self, schedule: WorkSchedule) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_schedule_days WHERE employee_id=%s", (schedule.employee_id,))
            for d in schedule.days.values():
                cur.execute(
                    """
                    INSERT INTO work_schedule_days(employee_id, weekday, start_time, end_time, has_lunch, lunch_break_seconds, is_day_off)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        schedule.employee_id,
                        d.weekday.value,
                        d.start,
                        d.end,
                        int(d.has_lunch),
                        d.expected_lunch_break_seconds,
                        int(d.is_day_off),
                    ),
                )
