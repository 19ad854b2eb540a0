from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from ..core.enums import Service
from .model import MemberAttendance


class AttendanceRepository(Protocol):
    def get_for_member_service_date(
        self, *, member_id: int, service: Service, service_date: date
    ) -> Optional[MemberAttendance]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        member_id: int,
        service: Service,
        service_date: date,
        check_in_time: datetime,
    ) -> MemberAttendance:
        """Insert one row; raises UniqueConstraintError if it already exists."""

        raise NotImplementedError
