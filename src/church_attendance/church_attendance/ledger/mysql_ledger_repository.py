from __future__ import annotations

from typing import Sequence

from ..core.enums import EntryKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LedgerRow, PurgeResult
from .repository import LedgerRepository

LEDGER_SQL = """
    SELECT
        CONCAT(m.first_name, ' ', m.last_name) AS name,
        'Member' AS kind,
        m.phone AS phone,
        m.gender AS gender,
        a.service AS service,
        a.service_date AS service_date,
        a.check_in_time AS check_in_time
    FROM member_attendance a
    JOIN members m ON a.member_id = m.id

    UNION ALL

    SELECT
        v.full_name AS name,
        'Visitor' AS kind,
        v.phone AS phone,
        v.gender AS gender,
        va.service AS service,
        va.service_date AS service_date,
        va.check_in_time AS check_in_time
    FROM visitor_attendance va
    JOIN visitors v ON va.visitor_id = v.id

    ORDER BY service_date DESC, check_in_time DESC
"""


class MySQLLedgerRepository(LedgerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_rows(self) -> Sequence[LedgerRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(LEDGER_SQL)
            rows = fetchall(cur)
            return [
                LedgerRow(
                    name=r["name"],
                    kind=EntryKind(r["kind"]),
                    phone=r.get("phone"),
                    gender=r.get("gender"),
                    service=r["service"],
                    service_date=r["service_date"],
                    check_in_time=r.get("check_in_time"),
                )
                for r in rows
            ]

    def purge_attendance(self) -> PurgeResult:
        # DELETE instead of TRUNCATE: both tables go in one transaction and rowcount is real.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM member_attendance")
            members = int(cur.rowcount or 0)
            cur.execute("DELETE FROM visitor_attendance")
            visitors = int(cur.rowcount or 0)
            return PurgeResult(member_attendance=members, visitor_attendance=visitors)
