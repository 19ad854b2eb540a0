from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import Service


@dataclass(frozen=True)
class MemberAttendance:
    """One member check-in; unique per (member, service, service_date)."""

    id: int
    member_id: int
    service: Service
    service_date: date
    check_in_time: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "member_id": self.member_id,
            "service": self.service.value,
            "service_date": self.service_date.isoformat(),
            "check_in_time": self.check_in_time.isoformat(),
        }
