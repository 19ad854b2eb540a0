from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class Member:
    """Registered church member (provisioned elsewhere, read-only here)."""

    id: int
    member_id: str
    first_name: str
    last_name: str
    phone: str
    gender: Gender
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "member_id": self.member_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "email": self.email,
            "gender": self.gender.value,
        }
