from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from ..core.enums import Gender, Service
from .model import VisitorRegistration


class VisitorRepository(Protocol):
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
        """Insert the visitor and its attendance in one transaction (both or neither)."""

        raise NotImplementedError
