import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_attendance"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_POOL_NAME = os.getenv("DB_POOL_NAME", "church_attendance")

LEDGER_PIN = os.getenv("LEDGER_PIN", "1234")

FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "")

REPORT_TITLE = os.getenv("REPORT_TITLE", "RFP Ministries")
REPORT_SUBTITLE = os.getenv("REPORT_SUBTITLE", "Raised For a Purpose")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
