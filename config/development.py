import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timebank_db"),
}

# Civil timezone for every date boundary and rendered timestamp
TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")
FIRST_WEEKDAY = os.getenv("FIRST_WEEKDAY", "sunday")
DEFAULT_LUNCH_BREAK_MINUTES = int(os.getenv("DEFAULT_LUNCH_BREAK_MINUTES", "60"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
