from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LEDGER_PIN, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .ledger.mysql_ledger_repository import MySQLLedgerRepository
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService, PinGate
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberSearchService
from .reports.pdf_renderer import LedgerPdfRenderer
from .visitors.mysql_visitor_repository import MySQLVisitorRepository
from .visitors.repository import VisitorRepository
from .visitors.service import VisitorService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    visitors_repo: VisitorRepository
    ledger_repo: LedgerRepository

    member_search_service: MemberSearchService
    attendance_service: AttendanceService
    visitor_service: VisitorService
    ledger_service: LedgerService
    pin_gate: PinGate
    report_renderer: LedgerPdfRenderer


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    visitors_repo: VisitorRepository,
    ledger_repo: LedgerRepository,
    ledger_pin: str = DEFAULT_LEDGER_PIN,
    report_renderer: Optional[LedgerPdfRenderer] = None,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""
    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        visitors_repo=visitors_repo,
        ledger_repo=ledger_repo,
        member_search_service=MemberSearchService(members_repo),
        attendance_service=AttendanceService(attendance_repo, members_repo),
        visitor_service=VisitorService(visitors_repo),
        ledger_service=LedgerService(ledger_repo),
        pin_gate=PinGate(ledger_pin),
        report_renderer=report_renderer or LedgerPdfRenderer(),
    )


def build_container(
    *,
    db_config: dict,
    ledger_pin: str = DEFAULT_LEDGER_PIN,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_name: str = "church_attendance",
    report_title: str = "RFP Ministries",
    report_subtitle: str = "Raised For a Purpose",
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
        pool_name=str(pool_name),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        conn=conn,
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        visitors_repo=MySQLVisitorRepository(conn),
        ledger_repo=MySQLLedgerRepository(conn),
        ledger_pin=ledger_pin,
        report_renderer=LedgerPdfRenderer(title=report_title, subtitle=report_subtitle),
    )
