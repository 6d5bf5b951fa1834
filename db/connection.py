"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool, shared by all request handlers.
"""

import re
import threading
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from db.errors import ConstraintError, StoreError
from utils.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_pyformat(text: str, params: Sequence[Any]) -> tuple[str, tuple]:
    """
    Rewrite ``$n`` placeholders into psycopg2's ``%s`` style.

    Parameters are reordered to match the order placeholders appear in,
    so a placeholder may be referenced more than once.

    Raises:
        IndexError: If a placeholder has no matching parameter.
    """
    ordered: list = []

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise IndexError(f"No parameter for placeholder ${index}")
        ordered.append(params[index - 1])
        return "%s"

    escaped = text.replace("%", "%%")
    return _PLACEHOLDER.sub(_replace, escaped), tuple(ordered)


class Database:
    """
    Owns one connection pool for the process lifetime.

    Open it at startup, close it at shutdown, and pass the instance down
    to the repositories.
    """

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        self._slots = threading.BoundedSemaphore(max_conn)

    def open(self) -> None:
        """
        Initialize the database connection pool.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def query(self, text: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Execute one statement and commit it.

        Args:
            text: SQL using ``$1, $2, ...`` placeholders.
            params: Positional values for the placeholders.

        Returns:
            The result rows as dicts (empty for statements without rows).

        Raises:
            RuntimeError: If the pool has not been opened.
            ConstraintError: If the statement violates a constraint.
            StoreError: If the database is unreachable or the statement fails.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")

        sql, values = to_pyformat(text, params)
        # at most max_conn borrowers; further callers wait here
        with self._slots:
            conn = None
            try:
                conn = self._pool.getconn()
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql, values)
                    rows = [dict(row) for row in cur.fetchall()] if cur.description else []
                conn.commit()
                return rows
            except psycopg2.Error as e:
                if conn is not None and not conn.closed:
                    try:
                        conn.rollback()
                    except psycopg2.Error as rollback_error:
                        logger.warning(f"Rollback failed: {rollback_error}")
                logger.error(f"Query failed: {e}")
                if isinstance(e, psycopg2.IntegrityError):
                    raise ConstraintError(str(e)) from e
                raise StoreError(str(e)) from e
            finally:
                if conn is not None:
                    self._pool.putconn(conn, close=bool(conn.closed))
