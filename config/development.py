import os

from . import split_origins

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_log_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

CORS_ORIGINS = split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
REPORT_DURATION_STYLE = os.getenv("REPORT_DURATION_STYLE", "verbose")
