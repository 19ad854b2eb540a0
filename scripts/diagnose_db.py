"""Print connection details, tables and row counts for the configured database."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.church_attendance.church_attendance.database.bootstrap import list_tables, ping, table_counts
from src.church_attendance.church_attendance.database.connection import DBConfig, DatabaseConnection
from src.church_attendance.church_attendance.main import configure_logging


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db = dict(settings.DB_CONFIG)
    conn = DatabaseConnection(
        DBConfig(
            host=db["host"],
            port=int(db.get("port", 3306)),
            user=db["user"],
            password=db["password"],
            database=db["database"],
            pool_size=1,
            pool_name="diagnose",
        )
    )

    print(f"Target: {db['user']}@{db['host']}:{db.get('port', 3306)}/{db['database']}")
    print("Ping:", "ok" if ping(conn) else "FAILED")
    print("Tables:", ", ".join(list_tables(db)) or "(none)")
    for table, n in table_counts(conn).items():
        print(f"  {table:<20} {n:>8}")


if __name__ == "__main__":
    main()
