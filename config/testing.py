import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timebank_test"),
}

TIMEZONE = "America/Sao_Paulo"
FIRST_WEEKDAY = "sunday"
DEFAULT_LUNCH_BREAK_MINUTES = 60

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
