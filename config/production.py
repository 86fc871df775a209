import os

from config import env_list

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

TIMEZONE = os.getenv("TIMEZONE", "UTC")

REPORT_RECIPIENTS = env_list("REPORT_RECIPIENTS")
PREVIEW_RECIPIENTS = env_list("PREVIEW_RECIPIENTS") or REPORT_RECIPIENTS

SMTP_CONFIG = {
    "host": os.getenv("SMTP_HOST", "localhost"),
    "port": int(os.getenv("SMTP_PORT", "587")),
    "sender": os.getenv("SMTP_SENDER", ""),
    "username": os.getenv("SMTP_USERNAME") or None,
    "password": os.getenv("SMTP_PASSWORD") or None,
    "use_tls": bool(int(os.getenv("SMTP_USE_TLS", "1"))),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
