# tests/fakes.py

from __future__ import annotations

import re
import sqlite3
import threading
from collections.abc import Sequence
from typing import Any

from db.errors import ConstraintError, StoreError

_PLACEHOLDER = re.compile(r"\$(\d+)")

SQLITE_SCHEMA = """
CREATE TABLE users (
    id      INTEGER PRIMARY KEY AUTOINCREMENT,
    name    TEXT NOT NULL,
    sort    BOOLEAN NOT NULL DEFAULT 0,
    filter  BOOLEAN NOT NULL DEFAULT 0
);
CREATE TABLE tasks (
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id  INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    value    TEXT NOT NULL,
    due_date TEXT NOT NULL,
    status   BOOLEAN NOT NULL DEFAULT 0
);
"""


class SqliteDatabase:
    """
    Stand-in for db.connection.Database backed by in-memory SQLite.

    Statements keep their ``$n`` placeholders; they are rewritten to
    SQLite's numbered ``?n`` form, so the repositories' real SQL runs.
    Every executed statement is recorded for assertions.
    """

    def __init__(self) -> None:
        self.conn = sqlite3.connect(":memory:", check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON")
        self.conn.executescript(SQLITE_SCHEMA)
        self.lock = threading.Lock()
        self.statements: list[tuple[str, list]] = []
        self.opened = False

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.opened = False

    def query(self, text: str, params: Sequence[Any] = ()) -> list[dict]:
        self.statements.append((text, list(params)))
        sql = _PLACEHOLDER.sub(r"?\1", text)
        with self.lock:
            try:
                cur = self.conn.execute(sql, tuple(params))
                rows = [dict(r) for r in cur.fetchall()]
                self.conn.commit()
                return rows
            except sqlite3.IntegrityError as e:
                self.conn.rollback()
                raise ConstraintError(str(e)) from e
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StoreError(str(e)) from e

    def count(self, table: str) -> int:
        return self.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


class FailingDatabase:
    """A store that is down: every statement fails."""

    def __init__(self) -> None:
        self.calls = 0
        self.opened = False
        self.closed = False

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.closed = True

    def query(self, text: str, params: Sequence[Any] = ()) -> list[dict]:
        self.calls += 1
        raise StoreError("connection refused")


class RecordingDatabase:
    """Records statements and returns canned rows, in call order."""

    def __init__(self, results: list[list[dict]] | None = None) -> None:
        self.results = list(results or [])
        self.statements: list[tuple[str, list]] = []

    def query(self, text: str, params: Sequence[Any] = ()) -> list[dict]:
        self.statements.append((text, list(params)))
        return self.results.pop(0) if self.results else []
