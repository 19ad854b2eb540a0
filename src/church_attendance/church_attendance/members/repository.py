from __future__ import annotations

from typing import Optional, Protocol

from .model import Member


class MemberRepository(Protocol):
    """Read-only access to members."""

    def get_by_id(self, id: int) -> Optional[Member]:
        raise NotImplementedError

    def find_by_code(self, member_code: str) -> Optional[Member]:
        """Case-insensitive exact match on the public member code."""

        raise NotImplementedError

    def find_first_matching(self, term: str) -> Optional[Member]:
        """First member (by insertion order) whose phone or name contains term."""

        raise NotImplementedError
