import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_test"),
}

TIMEZONE = "UTC"

REPORT_RECIPIENTS = ["reports@example.com"]
PREVIEW_RECIPIENTS = ["preview@example.com"]

SMTP_CONFIG = {
    "host": "localhost",
    "port": 1025,
    "sender": "timeclock@example.com",
    "username": None,
    "password": None,
    "use_tls": False,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
