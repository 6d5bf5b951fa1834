# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app
from repositories.task_repo import TaskRepository
from repositories.user_repo import UserRepository

from .fakes import SqliteDatabase


@pytest.fixture()
def db() -> SqliteDatabase:
    """
    In-memory store per test.

    Repositories run their real SQL against it, so ordering, filtering
    and RETURNING behaviour are exercised rather than mocked.
    """
    return SqliteDatabase()


@pytest.fixture()
def users(db: SqliteDatabase) -> UserRepository:
    return UserRepository(db)


@pytest.fixture()
def tasks(db: SqliteDatabase, users: UserRepository) -> TaskRepository:
    return TaskRepository(db, users)


@pytest.fixture()
def client(db: SqliteDatabase):
    """TestClient with the lifespan running (opens and closes the fake store)."""
    app = create_app(db, init_schema=False)
    with TestClient(app) as c:
        yield c
