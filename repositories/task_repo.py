"""
repositories/task_repo.py
-------------------------
Data access layer for to-do tasks.
All SQL queries related to the `tasks` table live here.

Missing rows are reported as None. Database failures surface as
StoreError from the connection layer and are not caught here.
"""

from typing import Any, Mapping, Optional

from db.connection import Database
from db.query_builder import build_filter_order, build_set_clause
from models.task import TASK_UPDATABLE_FIELDS, Task
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, user_id, value, due_date, status"


class TaskRepository:
    """Repository for CRUD operations on the tasks table."""

    def __init__(self, db: Database, users: Optional[UserRepository] = None):
        self.db = db
        self.users = users or UserRepository(db)

    # ── CREATE ────────────────────────────────────────────

    def create_task(self, task: Task) -> Task:
        """
        Insert a new task.

        Args:
            task: The Task to persist; its `id` is ignored.

        Returns:
            The row as stored, including the generated id.
        """
        sql = (
            "INSERT INTO tasks (user_id, value, due_date, status) VALUES($1, $2, $3, $4) "
            f"RETURNING {_COLUMNS}"
        )
        rows = self.db.query(sql, [task.user_id, task.value, task.due_date, task.status])
        created = self._row_to_task(rows[0])
        logger.info(f"Added task #{created.id} for user {created.user_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def list_tasks_for_user(self, user_id: int) -> Optional[list[Task]]:
        """
        Fetch a user's tasks, shaped by their sort/filter preferences.

        Returns:
            The tasks (possibly empty), or None if the user does not exist.
        """
        prefs = self.users.get_user_preferences(user_id)
        if prefs is None:
            return None

        suffix, suffix_params = build_filter_order(prefs)
        sql = "SELECT * FROM tasks WHERE user_id=$1" + suffix
        rows = self.db.query(sql, [user_id, *suffix_params])
        return [self._row_to_task(r) for r in rows]

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        """Fetch a single task, or None if not found."""
        sql = f"SELECT {_COLUMNS} FROM tasks WHERE id=$1"
        rows = self.db.query(sql, [task_id])
        return self._row_to_task(rows[0]) if rows else None

    # ── UPDATE ────────────────────────────────────────────

    def update_task_by_id(self, task_id: int, fields: Mapping[str, Any]) -> Optional[Task]:
        """
        Apply a partial update to a task.

        The existence check and the UPDATE are separate statements.

        Returns:
            The updated task, or None if no task has this id.

        Raises:
            EmptyUpdateError: If `fields` is empty.
            UnknownFieldError: If `fields` names a non-updatable column.
        """
        if self.get_task_by_id(task_id) is None:
            return None

        set_clause, params = build_set_clause(fields, task_id, allowed=TASK_UPDATABLE_FIELDS)
        sql = f"UPDATE tasks {set_clause} RETURNING {_COLUMNS}"
        rows = self.db.query(sql, params)
        # Deleted between the check and the update.
        if not rows:
            return None
        logger.info(f"Updated task #{task_id}: {', '.join(fields)}")
        return self._row_to_task(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def delete_task_by_id(self, task_id: int) -> Optional[Task]:
        """
        Delete a task.

        Returns:
            The row image returned by the DELETE, or None if no task has this id.
        """
        if self.get_task_by_id(task_id) is None:
            return None

        sql = f"DELETE FROM tasks WHERE id=$1 RETURNING {_COLUMNS}"
        rows = self.db.query(sql, [task_id])
        if not rows:
            return None
        logger.info(f"Deleted task #{task_id}")
        return self._row_to_task(rows[0])

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_task(row: Mapping[str, Any]) -> Task:
        """Convert a database row to a Task domain object."""
        due = row["due_date"]
        return Task(
            id=row["id"],
            user_id=row["user_id"],
            value=row["value"],
            due_date=due.isoformat() if hasattr(due, "isoformat") else str(due),
            status=bool(row["status"]),
        )
