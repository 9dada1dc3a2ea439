from datetime import datetime, time, timedelta, timezone
from pathlib import Path

import pytest

from src.timebank.timebank.database.bootstrap import REQUIRED_TABLES, iter_schema_statements
from src.timebank.timebank.database.connection import DBConfig
from src.timebank.timebank.database.mysql_base import from_db_timestamp, to_db_timestamp, to_time_of_day

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_schema_statements_skip_database_lines_and_comments():
    statements = list(iter_schema_statements(SCHEMA.read_text(encoding="utf-8")))

    assert len(statements) == len(REQUIRED_TABLES)
    assert all(s.upper().startswith("CREATE TABLE") for s in statements)
    assert not any(s.endswith(";") for s in statements)
    assert "uq_punch_employee_date" in statements[2]


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        (time(8, 30), time(8, 30)),
        (timedelta(hours=17, minutes=15), time(17, 15)),
        ("08:00:00", time(8, 0)),
    ],
)
def test_time_columns(raw, expected):
    assert to_time_of_day(raw) == expected


def test_timestamps_round_trip_through_naive_utc(tz):
    local = datetime(2025, 6, 13, 8, 0, tzinfo=tz)

    stored = to_db_timestamp(local)

    assert stored == datetime(2025, 6, 13, 11, 0)
    assert from_db_timestamp(stored, tz) == local
    with pytest.raises(ValueError):
        to_db_timestamp(datetime(2025, 6, 13, 8, 0))
    assert to_db_timestamp(datetime(2025, 6, 13, 11, tzinfo=timezone.utc)) == stored


def test_db_config_defaults():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert cfg.describe() == "root@db:3307/timebank_db"
    assert "database" not in cfg.connect_kwargs(with_database=False)
