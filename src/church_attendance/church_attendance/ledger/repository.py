from __future__ import annotations

from typing import Protocol, Sequence

from .model import LedgerRow, PurgeResult


class LedgerRepository(Protocol):
    def list_rows(self) -> Sequence[LedgerRow]:
        """Every member and visitor check-in, newest first."""

        raise NotImplementedError

    def purge_attendance(self) -> PurgeResult:
        """Delete all attendance rows; members and visitors stay."""

        raise NotImplementedError
