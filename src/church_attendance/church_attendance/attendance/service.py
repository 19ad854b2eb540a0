from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import as_utc, now_utc, service_date_for
from ..core.enums import Service
from ..core.exceptions import DuplicateCheckIn, RegistrationFailed, StorageError, UniqueConstraintError, ValidationError
from ..members.repository import MemberRepository
from .model import MemberAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, members: MemberRepository):
        self._attendance = attendance
        self._members = members

    def register_attendance(self, member_id: int, service: Service, *, now: datetime | None = None) -> MemberAttendance:
        """Check a member in for today's service.

        The lookup only exists to give a friendly DuplicateCheckIn early. The
        unique key on (member_id, service, service_date) is what actually stops
        two concurrent check-ins, so a unique violation on insert is reported
        the same way.
        """
        now = as_utc(now or now_utc())
        today = service_date_for(now)

        if self._members.get_by_id(member_id) is None:
            raise ValidationError("member_id does not reference an existing member")

        existing = self._attendance.get_for_member_service_date(
            member_id=member_id, service=service, service_date=today
        )
        if existing:
            logger.info("Duplicate check-in: member=%s service=%s date=%s", member_id, service.value, today)
            raise DuplicateCheckIn()

        try:
            record = self._attendance.create_checkin(
                member_id=member_id,
                service=service,
                service_date=today,
                check_in_time=now,
            )
        except UniqueConstraintError as e:
            logger.info("Concurrent duplicate check-in rejected by store: member=%s service=%s", member_id, service.value)
            raise DuplicateCheckIn() from e
        except StorageError as e:
            logger.exception("Member check-in failed: member=%s", member_id)
            raise RegistrationFailed("Could not record attendance") from e

        logger.info("Checked in member=%s service=%s date=%s", member_id, service.value, today)
        return record
