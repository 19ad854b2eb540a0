from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import StorageError, UniqueConstraintError
from .connection import DatabaseConnection


def _translate(err: mysql.connector.Error) -> StorageError:
    if getattr(err, "errno", None) == errorcode.ER_DUP_ENTRY:
        return UniqueConstraintError(str(err))
    return StorageError(str(err))


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction.

    Commits when the block finishes, rolls back on any exception and always
    hands the connection back to the pool. Driver errors surface as StorageError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as err:
        raise _translate(err) from err

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as err:
        conn.rollback()
        raise _translate(err) from err
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def like_pattern(term: str) -> str:
    """Wrap a term for a substring LIKE match, escaping LIKE wildcards."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
