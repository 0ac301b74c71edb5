from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateKeyError, StorageError

logger = logging.getLogger(__name__)

_DUP_KEY_RE = re.compile(r"for key '([^']+)'")


def duplicate_key_name(message: Optional[str]) -> Optional[str]:
    """Extract the index name from an ER_DUP_ENTRY message.

    MySQL 8 reports ``table.key`` while older servers report just ``key``.
    """
    if not message:
        return None
    match = _DUP_KEY_RE.search(message)
    if not match:
        return None
    return match.group(1).rsplit(".", 1)[-1]


def _rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        logger.warning("Rollback failed", exc_info=True)


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True, key_fields: Optional[Mapping[str, str]] = None):
    """Yield ``(conn, cursor)``; commit on success, roll back on error.

    Driver errors are translated: duplicate-entry violations become
    ``DuplicateKeyError`` (with ``key_fields`` mapping index name -> field),
    everything else becomes ``StorageError``.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        _rollback(conn)
        if e.errno == errorcode.ER_DUP_ENTRY:
            key = duplicate_key_name(e.msg)
            raise DuplicateKeyError(key, field=(key_fields or {}).get(key or "")) from e
        raise StorageError("Integrity error") from e
    except mysql.connector.Error as e:
        _rollback(conn)
        raise StorageError("Database operation failed") from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
