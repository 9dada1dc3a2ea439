"""Schema installation for ``database/schema.sql``.

The schema file only holds DDL, so statements are split on ``;`` at the end
of a line. ``CREATE DATABASE``/``USE`` lines are dropped and the configured
database name is used instead.
"""

from __future__ import annotations

import logging
import re
from contextlib import closing
from pathlib import Path
from typing import Iterator

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("employees", "work_schedule_days", "punch_records", "absences")

_DATABASE_LINE = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)
_STATEMENT_END = re.compile(r";\s*$")


def iter_schema_statements(sql: str) -> Iterator[str]:
    pending: list[str] = []
    for line in sql.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--") or _DATABASE_LINE.match(stripped):
            continue
        pending.append(line)
        if _STATEMENT_END.search(stripped):
            yield "\n".join(pending).strip().rstrip(";")
            pending = []
    if pending:
        yield "\n".join(pending).strip().rstrip(";")


def _connect(target: DBConfig, *, with_database: bool = True):
    return mysql.connector.connect(**target.connect_kwargs(with_database=with_database))


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with closing(_connect(target, with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    """Create the database if needed and run every schema statement; returns the statement count."""

    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    statements = list(iter_schema_statements(Path(schema_path).read_text(encoding="utf-8")))
    with closing(_connect(target)) as conn:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()

    logger.info("Applied %d schema statements to %s", len(statements), target.describe())
    return len(statements)


def list_tables(db_config: dict) -> list[str]:
    with closing(_connect(DBConfig.from_dict(db_config))) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())


def missing_tables(db_config: dict) -> list[str]:
    present = set(list_tables(db_config))
    return [t for t in REQUIRED_TABLES if t not in present]
