from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Gender, Service


@dataclass(frozen=True)
class Visitor:
    """Walk-in visitor; a fresh row per registration, never deduplicated."""

    id: int
    full_name: str
    phone: Optional[str]
    gender: Gender
    first_time: bool
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "phone": self.phone,
            "gender": self.gender.value,
            "first_time": self.first_time,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class VisitorAttendance:
    id: int
    visitor_id: int
    service: Service
    service_date: date
    check_in_time: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "visitor_id": self.visitor_id,
            "service": self.service.value,
            "service_date": self.service_date.isoformat(),
            "check_in_time": self.check_in_time.isoformat(),
        }


@dataclass(frozen=True)
class VisitorRegistration:
    visitor: Visitor
    attendance: VisitorAttendance
