from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import MAX_NAME_LENGTH, MAX_SEARCH_LENGTH, MIN_NAME_LENGTH, PHONE_PATTERN
from ..core.enums import VISITOR_GENDERS, Gender, Service
from ..core.exceptions import ValidationError

_PHONE_RE = re.compile(PHONE_PATTERN)
_WS_RE = re.compile(r"\s+")


def sanitise(value: Any) -> str:
    """Trim and collapse inner whitespace; anything but a string becomes ''."""
    if not isinstance(value, str):
        return ""
    return _WS_RE.sub(" ", value.strip())


def _service_or_error(value: Any, errors: list[str]) -> Optional[Service]:
    try:
        return Service(value)
    except ValueError:
        errors.append("service must be one of: " + ", ".join(s.value for s in Service))
        return None


@dataclass(frozen=True)
class CheckInRequest:
    member_id: int
    service: Service


@dataclass(frozen=True)
class VisitorRequest:
    full_name: str
    phone: Optional[str]
    gender: Gender
    first_time: bool
    service: Service


def validate_search_query(params: Mapping[str, Any]) -> str:
    q = params.get("q")
    if q is None or not str(q).strip():
        raise ValidationError("q is required and cannot be empty")
    term = sanitise(str(q))
    if len(term) > MAX_SEARCH_LENGTH:
        raise ValidationError(f"q must be under {MAX_SEARCH_LENGTH} characters")
    return term


def validate_check_in(body: Mapping[str, Any]) -> CheckInRequest:
    errors: list[str] = []
    member_id = body.get("member_id")
    # bool is an int subclass; reject it explicitly.
    if isinstance(member_id, bool) or not isinstance(member_id, int) or member_id < 1:
        errors.append("member_id must be a positive integer")
    service = _service_or_error(body.get("service"), errors)

    if errors:
        raise ValidationError(errors)
    return CheckInRequest(member_id=int(member_id), service=service)


def validate_visitor(body: Mapping[str, Any]) -> VisitorRequest:
    errors: list[str] = []
    full_name = sanitise(body.get("full_name"))
    phone = sanitise(body.get("phone"))
    gender_s = sanitise(body.get("gender"))
    first_time = body.get("first_time")

    if len(full_name) < MIN_NAME_LENGTH:
        errors.append(f"full_name is required (min {MIN_NAME_LENGTH} characters)")
    if len(full_name) > MAX_NAME_LENGTH:
        errors.append(f"full_name must be under {MAX_NAME_LENGTH} characters")
    if phone and not _PHONE_RE.match(phone):
        errors.append("phone must be a valid phone number (6-20 characters, digits only)")

    gender: Optional[Gender] = None
    try:
        gender = Gender(gender_s)
    except ValueError:
        pass
    if gender not in VISITOR_GENDERS:
        errors.append("gender must be one of: " + ", ".join(sorted(g.value for g in VISITOR_GENDERS)))

    if first_time is not True and first_time is not False:
        errors.append("first_time must be a boolean (true or false)")
    service = _service_or_error(body.get("service"), errors)

    if errors:
        raise ValidationError(errors)
    return VisitorRequest(
        full_name=full_name,
        phone=phone or None,
        gender=gender,
        first_time=first_time,
        service=service,
    )
