"""
handlers/dependencies.py
------------------------
FastAPI dependencies that hand the shared Database to the repositories.
"""

from fastapi import Depends, Request

from db.connection import Database
from repositories.task_repo import TaskRepository
from repositories.user_repo import UserRepository


def get_db(request: Request) -> Database:
    """The Database opened by the application lifespan."""
    return request.app.state.db


def get_user_repo(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_task_repo(
    db: Database = Depends(get_db),
    users: UserRepository = Depends(get_user_repo),
) -> TaskRepository:
    return TaskRepository(db, users)
