"""
models/user.py
--------------
Domain model for users and their task list preferences.
"""

from dataclasses import dataclass
from typing import Optional

PREFERENCE_NAMES: tuple[str, ...] = ("sort", "filter")
USER_UPDATABLE_FIELDS = ("name", "sort", "filter")


@dataclass
class User:
    """
    Represents a user who owns a task list.

    Attributes:
        name: Display name.
        sort: When True, tasks are listed by due date; otherwise newest first.
        filter: When True, completed tasks are hidden.
        id: Database primary key (None for new records).
    """
    name: str
    sort: bool = False
    filter: bool = False
    id: Optional[int] = None


@dataclass
class Preferences:
    """A user's sort/filter flags, read fresh for every task list query."""
    sort: bool = False
    filter: bool = False

    def __getitem__(self, name: str) -> bool:
        if name not in PREFERENCE_NAMES:
            raise KeyError(name)
        return getattr(self, name)
