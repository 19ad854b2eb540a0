from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import sanitise
from ..core.constants import MEMBER_CODE_PREFIX
from ..core.exceptions import ValidationError
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


def is_member_code(query: str) -> bool:
    return query.upper().startswith(MEMBER_CODE_PREFIX)


class MemberSearchService:
    """Resolves a free-text query to at most one member.

    A query starting with the member code prefix is an exact code lookup and
    never falls back to fuzzy matching. Anything else is a substring match on
    phone, first name, last name or full name; when several members match, the
    earliest inserted one wins. There is no relevance ranking.
    """

    def __init__(self, members: MemberRepository):
        self._members = members

    def resolve(self, query: str) -> Optional[Member]:
        term = sanitise(query)
        if not term:
            raise ValidationError("q is required and cannot be empty")

        if is_member_code(term):
            member = self._members.find_by_code(term)
        else:
            member = self._members.find_first_matching(term)

        if member is None:
            logger.info("No member matched %r", term)
        return member
