import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_attendance_test"),
}
DB_POOL_SIZE = 2
DB_POOL_NAME = "church_attendance_test"

LEDGER_PIN = "4321"

FRONTEND_ORIGIN = "http://localhost:3000"

REPORT_TITLE = "Test Church"
REPORT_SUBTITLE = "Testing"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
