from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import as_utc

MISSING = "—"

# Fixed English names so output does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTHS_LONG = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_service_date(value: Optional[date]) -> str:
    """05 Jan 2026"""
    if value is None:
        return MISSING
    if isinstance(value, datetime):
        value = as_utc(value).date()
    return f"{value.day:02d} {_MONTHS[value.month - 1]} {value.year}"


def format_long_date(value: date) -> str:
    return f"{value.day:02d} {_MONTHS_LONG[value.month - 1]} {value.year}"


def format_check_in(value: Optional[datetime]) -> str:
    """12-hour clock in UTC, e.g. 09:05 am."""
    if value is None:
        return MISSING
    value = as_utc(value)
    hour = value.hour % 12 or 12
    suffix = "am" if value.hour < 12 else "pm"
    return f"{hour:02d}:{value.minute:02d} {suffix}"


def display_value(value: Any) -> str:
    if value is None:
        return MISSING
    text = str(value).strip()
    return text or MISSING
