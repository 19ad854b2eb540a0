from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EntryKind


@dataclass(frozen=True)
class LedgerRow:
    """Read-model: one check-in, member or visitor, in a uniform shape."""

    name: str
    kind: EntryKind
    phone: Optional[str]
    gender: Optional[str]
    service: str
    service_date: date
    check_in_time: Optional[datetime]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.kind.value,
            "phone": self.phone,
            "gender": self.gender,
            "service": self.service,
            "service_date": self.service_date.isoformat(),
            "check_in_time": self.check_in_time.isoformat() if self.check_in_time else None,
        }


def ledger_sort_key(row: LedgerRow):
    # Used with reverse=True: newest first, rows without a check-in time last within a date.
    has_time = row.check_in_time is not None
    return (row.service_date, has_time, row.check_in_time or datetime.min)


@dataclass(frozen=True)
class PurgeResult:
    member_attendance: int
    visitor_attendance: int

    def to_dict(self) -> dict:
        return {
            "attendance": self.member_attendance,
            "visitor_attendance": self.visitor_attendance,
        }
