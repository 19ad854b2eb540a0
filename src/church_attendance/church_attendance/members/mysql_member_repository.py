from __future__ import annotations

from typing import Optional

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, like_pattern
from .model import Member
from .repository import MemberRepository

_COLUMNS = "id, member_id, first_name, last_name, phone, email, gender"


def _to_member(row: dict) -> Member:
    return Member(
        id=int(row["id"]),
        member_id=row["member_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row["phone"],
        email=row.get("email"),
        gender=Gender(row["gender"]),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (int(id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def find_by_code(self, member_code: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE UPPER(member_id) = UPPER(%s)
                LIMIT 1
                """,
                (member_code,),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def find_first_matching(self, term: str) -> Optional[Member]:
        pattern = like_pattern(term)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE phone LIKE %s
                   OR first_name LIKE %s
                   OR last_name LIKE %s
                   OR CONCAT(first_name, ' ', last_name) LIKE %s
                ORDER BY id ASC
                LIMIT 1
                """,
                (pattern, pattern, pattern, pattern),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None
