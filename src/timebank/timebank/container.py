from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.repository import AbsenceRepository
from .absences.service import AbsenceService
from .balance.aggregator import BalanceAggregator
from .balance.classifier import DayClassifier
from .balance.service import BalanceService
from .balance.window import PeriodWindowBuilder
from .common.datetime_utils import get_zone
from .core.constants import DEFAULT_FIRST_WEEKDAY, DEFAULT_LUNCH_BREAK_MINUTES, DEFAULT_TIMEZONE
from .core.enums import Weekday
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.resolver import ScheduleResolver
from .schedules.service import ScheduleService


@dataclass(frozen=True)
class Container:
    tz: tzinfo
    conn: Optional[DatabaseConnection]

    schedules_repo: ScheduleRepository
    punches_repo: PunchRepository
    absences_repo: AbsenceRepository
    employees_repo: EmployeeRepository

    schedule_service: ScheduleService
    punch_service: PunchService
    absence_service: AbsenceService
    balance_service: BalanceService


def assemble(
    *,
    schedules_repo: ScheduleRepository,
    punches_repo: PunchRepository,
    absences_repo: AbsenceRepository,
    employees_repo: EmployeeRepository,
    tz: tzinfo,
    first_weekday: Weekday = DEFAULT_FIRST_WEEKDAY,
    default_lunch_break_minutes: int = DEFAULT_LUNCH_BREAK_MINUTES,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services around the given repositories (MySQL in production, in-memory in tests)."""

    resolver = ScheduleResolver()
    classifier = DayClassifier(tz, resolver=resolver)

    schedule_service = ScheduleService(schedules_repo)
    punch_service = PunchService(
        punches_repo,
        schedules_repo,
        tz=tz,
        resolver=resolver,
        default_lunch_break_minutes=default_lunch_break_minutes,
    )
    absence_service = AbsenceService(
        absences_repo,
        employees_repo,
        schedules_repo,
        punches_repo,
        tz=tz,
        classifier=classifier,
    )
    balance_service = BalanceService(
        schedules_repo,
        punches_repo,
        absences_repo,
        employees_repo,
        tz=tz,
        window_builder=PeriodWindowBuilder(tz, first_weekday=first_weekday),
        aggregator=BalanceAggregator(tz, classifier=classifier, resolver=resolver),
    )

    return Container(
        tz=tz,
        conn=conn,
        schedules_repo=schedules_repo,
        punches_repo=punches_repo,
        absences_repo=absences_repo,
        employees_repo=employees_repo,
        schedule_service=schedule_service,
        punch_service=punch_service,
        absence_service=absence_service,
        balance_service=balance_service,
    )


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    first_weekday: "Weekday | str" = DEFAULT_FIRST_WEEKDAY,
    default_lunch_break_minutes: int = DEFAULT_LUNCH_BREAK_MINUTES,
) -> Container:
    tz = get_zone(timezone)
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        schedules_repo=MySQLScheduleRepository(conn),
        punches_repo=MySQLPunchRepository(conn, tz=tz),
        absences_repo=MySQLAbsenceRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        tz=tz,
        first_weekday=Weekday.parse(first_weekday),
        default_lunch_break_minutes=int(default_lunch_break_minutes),
        conn=conn,
    )
