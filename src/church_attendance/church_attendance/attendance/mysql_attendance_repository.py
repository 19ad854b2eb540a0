from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.enums import Service
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MemberAttendance
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_member_service_date(
        self, *, member_id: int, service: Service, service_date: date
    ) -> Optional[MemberAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, member_id, service, service_date, check_in_time
                FROM member_attendance
                WHERE member_id=%s AND service=%s AND service_date=%s
                LIMIT 1
                """,
                (int(member_id), service.value, service_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MemberAttendance(
                id=int(r["id"]),
                member_id=int(r["member_id"]),
                service=Service(r["service"]),
                service_date=r["service_date"],
                check_in_time=r["check_in_time"],
            )

    def create_checkin(
        self,
        *,
        member_id: int,
        service: Service,
        service_date: date,
        check_in_time: datetime,
    ) -> MemberAttendance:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO member_attendance(member_id, service, service_date, check_in_time)
                VALUES(%s,%s,%s,%s)
                """,
                (int(member_id), service.value, service_date, check_in_time),
            )
            return MemberAttendance(
                id=int(cur.lastrowid),
                member_id=int(member_id),
                service=service,
                service_date=service_date,
                check_in_time=check_in_time,
            )
