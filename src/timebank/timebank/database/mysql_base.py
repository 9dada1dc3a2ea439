from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Any, Dict, Iterator, List, Optional, Tuple

from mysql.connector import errorcode

from ..common.datetime_utils import parse_time_of_day
from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """One connection, one transaction: commit on success, rollback on any error."""
    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def fetchone(cur) -> Optional[Row]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Row]:
    return list(cur.fetchall() or [])


def is_duplicate_key(exc: Exception) -> bool:
    return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def to_db_timestamp(value: Optional[datetime]) -> Optional[datetime]:
    """DATETIME columns hold naive UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        raise ValueError("Timestamps must be timezone-aware before they are stored")
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db_timestamp(value: Optional[datetime], tz: tzinfo) -> Optional[datetime]:
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc).astimezone(tz)


def to_time_of_day(value: Any) -> Optional[time]:
    """TIME columns arrive as ``timedelta`` from the C extension, ``time`` or ``str`` otherwise."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        return (datetime.min + value).time()
    if isinstance(value, str):
        return parse_time_of_day(value)
    raise TypeError(f"Unsupported MySQL TIME value: {value!r}")
