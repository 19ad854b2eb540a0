from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.enums import Gender, Service
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import Visitor, VisitorAttendance, VisitorRegistration
from .repository import VisitorRepository


class MySQLVisitorRepository(VisitorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_with_attendance(
        self,
        *,
        full_name: str,
        phone: Optional[str],
        gender: Gender,
        first_time: bool,
        service: Service,
        service_date: date,
        check_in_time: datetime,
    ) -> VisitorRegistration:
        # db_cursor is a single transaction: a failure on the second insert
        # rolls back the first.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO visitors(full_name, phone, gender, first_time, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (full_name, phone, gender.value, int(bool(first_time)), check_in_time),
            )
            visitor = Visitor(
                id=int(cur.lastrowid),
                full_name=full_name,
                phone=phone,
                gender=gender,
                first_time=bool(first_time),
                created_at=check_in_time,
            )

            cur.execute(
                """
                INSERT INTO visitor_attendance(visitor_id, service, service_date, check_in_time)
                VALUES(%s,%s,%s,%s)
                """,
                (visitor.id, service.value, service_date, check_in_time),
            )
            attendance = VisitorAttendance(
                id=int(cur.lastrowid),
                visitor_id=visitor.id,
                service=service,
                service_date=service_date,
                check_in_time=check_in_time,
            )

        return VisitorRegistration(visitor=visitor, attendance=attendance)
