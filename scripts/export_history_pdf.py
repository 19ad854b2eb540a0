"""Write the attendance ledger PDF to a file (same document as GET /api/history/pdf)."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.church_attendance.church_attendance.container import build_container
from src.church_attendance.church_attendance.main import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-o", "--output", default="Attendance_History.pdf")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config=settings.DB_CONFIG,
        ledger_pin=settings.LEDGER_PIN,
        report_title=getattr(settings, "REPORT_TITLE", "RFP Ministries"),
        report_subtitle=getattr(settings, "REPORT_SUBTITLE", "Raised For a Purpose"),
    )

    rows = container.ledger_service.list_ledger()
    out = Path(args.output)
    report = container.report_renderer.render_report(rows)
    out.write_bytes(report.data)
    print(f"OK: {len(rows)} records -> {out} ({report.page_count} pages)")


if __name__ == "__main__":
    main()
