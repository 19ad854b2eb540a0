from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_utc, now_utc, service_date_for
from ..core.enums import Gender, Service
from ..core.exceptions import RegistrationFailed, StorageError
from .model import VisitorRegistration
from .repository import VisitorRepository

logger = logging.getLogger(__name__)


class VisitorService:
    def __init__(self, visitors: VisitorRepository):
        self._visitors = visitors

    def register_visitor(
        self,
        *,
        full_name: str,
        phone: Optional[str],
        gender: Gender,
        first_time: bool,
        service: Service,
        now: datetime | None = None,
    ) -> VisitorRegistration:
        now = as_utc(now or now_utc())
        try:
            registration = self._visitors.create_with_attendance(
                full_name=full_name,
                phone=phone or None,
                gender=gender,
                first_time=first_time,
                service=service,
                service_date=service_date_for(now),
                check_in_time=now,
            )
        except StorageError as e:
            logger.exception("Visitor registration failed for %r", full_name)
            raise RegistrationFailed("Could not register visitor") from e

        logger.info("Registered visitor id=%s service=%s", registration.visitor.id, service.value)
        return registration
