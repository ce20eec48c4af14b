import os

from . import split_origins

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_log_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

CORS_ORIGINS = split_origins(os.getenv("CORS_ORIGINS", "https://pontodigital-cogna.vercel.app"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
REPORT_DURATION_STYLE = os.getenv("REPORT_DURATION_STYLE", "verbose")
