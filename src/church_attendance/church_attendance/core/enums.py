from __future__ import annotations

from enum import Enum


class Service(str, Enum):
    """Recurring services attendance is recorded against."""

    SUNDAY_MORNING = "Sunday Morning Service"
    SUNDAY_MID = "Sunday Mid Service"
    MID_WEEK = "Mid-Week Service"
    LUNCH_HOUR = "Lunch-Hour Service"
    SPECIAL = "Special Service"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


# Visitors are registered as Male or Female only.
VISITOR_GENDERS = frozenset({Gender.MALE, Gender.FEMALE})


class EntryKind(str, Enum):
    """Discriminant for ledger rows."""

    MEMBER = "Member"
    VISITOR = "Visitor"
