from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Tuple[Any, Any]]:
    """Run one unit of work: commit on success, roll back on any error."""
    with conn_factory.lock:
        conn = conn_factory.connect()
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()


def fetchone(cur) -> Optional[Tuple[Any, ...]]:
    row = cur.fetchone()
    return row if row else None

