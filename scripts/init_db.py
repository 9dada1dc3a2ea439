"""Create the configured database and apply database/schema.sql.

Usage: APP_ENV=production python scripts/init_db.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timebank.timebank.database.bootstrap import apply_schema, missing_tables
from src.timebank.timebank.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main() -> int:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    count = apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    missing = missing_tables(db_config)
    if missing:
        logger.error("Tables still missing after %d statements: %s", count, ", ".join(missing))
        return 1

    logger.info("Schema ready on %s", DBConfig.from_dict(db_config).describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
