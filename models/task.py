"""
models/task.py
--------------
Domain model for to-do items.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Task:
    """
    Represents a single to-do item owned by one user.

    Attributes:
        user_id: Owner's user ID (immutable once created).
        value: The text of the task.
        due_date: Due date as ISO text (YYYY-MM-DD).
        status: True when completed, False when still open.
        id: Database primary key (None for new records).
    """
    user_id: int
    value: str
    due_date: str
    status: bool = False
    id: Optional[int] = None

    def is_completed(self) -> bool:
        """Returns True if this task has been completed."""
        return bool(self.status)


# Columns a partial update may touch; id and user_id are immutable.
TASK_UPDATABLE_FIELDS = ("value", "due_date", "status")
