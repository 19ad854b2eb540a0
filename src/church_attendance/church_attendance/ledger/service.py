from __future__ import annotations

import hmac
import logging
from typing import Optional

from ..core.exceptions import AccessDenied
from .model import LedgerRow, PurgeResult, ledger_sort_key
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


class PinGate:
    """Static shared-secret check guarding ledger read/delete/render."""

    def __init__(self, pin: str):
        if not pin:
            raise ValueError("ledger PIN must not be empty")
        self._pin = str(pin)

    def check(self, supplied: Optional[object]) -> None:
        if supplied is None or not hmac.compare_digest(str(supplied).encode(), self._pin.encode()):
            raise AccessDenied("Invalid or missing PIN. Access denied.")


class LedgerService:
    def __init__(self, ledger: LedgerRepository):
        self._ledger = ledger

    def list_ledger(self) -> list[LedgerRow]:
        rows = self._ledger.list_rows()
        # sorted() is stable; keeps the store order among equal keys.
        ordered = sorted(rows, key=ledger_sort_key, reverse=True)
        logger.debug("Ledger read: %d rows", len(ordered))
        return ordered

    def purge_ledger(self) -> PurgeResult:
        result = self._ledger.purge_attendance()
        logger.warning(
            "Ledger purged: %d member and %d visitor check-ins removed",
            result.member_attendance,
            result.visitor_attendance,
        )
        return result
