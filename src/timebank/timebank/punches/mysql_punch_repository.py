from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import PunchField
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    from_db_timestamp,
    is_duplicate_key,
    to_db_timestamp,
)
from .model import Location, PunchRecord
from .repository import PunchRepository

_COLUMNS = "record_id, employee_id, work_date, clock_in, lunch_start, lunch_end, clock_out, latitude, longitude"


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz: tzinfo):
        self._conn_factory = conn_factory
        self._tz = tz

    def _to_record(self, r: dict) -> PunchRecord:
        location = None
        if r.get("latitude") is not None and r.get("longitude") is not None:
            location = Location(latitude=float(r["latitude"]), longitude=float(r["longitude"]))
        return PunchRecord(
            record_id=int(r["record_id"]),
            employee_id=int(r["employee_id"]),
            work_date=r["work_date"],
            clock_in=from_db_timestamp(r.get("clock_in"), self._tz),
            lunch_start=from_db_timestamp(r.get("lunch_start"), self._tz),
            lunch_end=from_db_timestamp(r.get("lunch_end"), self._tz),
            clock_out=from_db_timestamp(r.get("clock_out"), self._tz),
            location=location,
        )

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM punch_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def list_range(self, employee_id: int, start: date, end: date) -> Sequence[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(employee_id), start, end),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def insert_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        timestamp: datetime,
        location: Optional[Location] = None,
    ) -> PunchRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # uq_punch_employee_date rejects the second writer; no prior SELECT.
                cur.execute(
                    """
                    INSERT INTO punch_records(employee_id, work_date, clock_in, latitude, longitude)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (
                        int(employee_id),
                        work_date,
                        to_db_timestamp(timestamp),
                        location.latitude if location else None,
                        location.longitude if location else None,
                    ),
                )
                record_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError("Already clocked in today") from exc
            raise

        return PunchRecord(
            record_id=record_id,
            employee_id=int(employee_id),
            work_date=work_date,
            clock_in=timestamp,
            location=location,
        )

    def set_timestamp(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_field: PunchField,
        timestamp: datetime,
    ) -> bool:
        column = PunchField(punch_field).value
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE punch_records
                SET {column}=%s
                WHERE employee_id=%s AND work_date=%s AND {column} IS NULL
                """,
                (to_db_timestamp(timestamp), int(employee_id), work_date),
            )
            return cur.rowcount > 0
