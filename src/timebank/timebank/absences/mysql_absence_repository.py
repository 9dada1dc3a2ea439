from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AbsenceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AbsenceRecord
from .repository import AbsenceRepository

_COLUMNS = "absence_id, employee_id, work_date, absence_type, description, created_by"


def _to_record(r: dict) -> AbsenceRecord:
    return AbsenceRecord(
        absence_id=int(r["absence_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        type=AbsenceType(r["absence_type"]),
        description=r.get("description"),
        created_by=int(r["created_by"]) if r.get("created_by") is not None else None,
    )


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AbsenceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM absences WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_range(self, employee_id: int, start: date, end: date) -> Sequence[AbsenceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM absences
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(employee_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[AbsenceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM absences WHERE employee_id=%s ORDER BY work_date DESC",
                (int(employee_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(self, absence: AbsenceRecord) -> AbsenceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO absences(employee_id, work_date, absence_type, description, created_by)
                VALUES(%s,%s,%s,%s,%s) AS incoming
                ON DUPLICATE KEY UPDATE absence_type=incoming.absence_type, description=incoming.description
                """,
                (
                    absence.employee_id,
                    absence.work_date,
                    absence.type.value,
                    absence.description,
                    absence.created_by,
                ),
            )

            # Read back the stored row: an update keeps the original id and created_by.
            cur.execute(
                f"SELECT {_COLUMNS} FROM absences WHERE employee_id=%s AND work_date=%s",
                (absence.employee_id, absence.work_date),
            )
            return _to_record(fetchone(cur))
