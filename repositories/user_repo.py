"""
repositories/user_repo.py
--------------------------
Data access layer for user records and their task list preferences.
"""

from typing import Any, Mapping, Optional

from db.connection import Database
from db.query_builder import build_set_clause
from models.user import PREFERENCE_NAMES, USER_UPDATABLE_FIELDS, Preferences, User
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, sort, filter"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, db: Database):
        self.db = db

    def create_user(self, name: str, sort: bool = False, filter: bool = False) -> User:
        """Insert a new user and return it with its generated id."""
        sql = f"INSERT INTO users (name, sort, filter) VALUES($1, $2, $3) RETURNING {_COLUMNS}"
        rows = self.db.query(sql, [name, sort, filter])
        user = self._row_to_user(rows[0])
        logger.info(f"Added user #{user.id}")
        return user

    def list_users(self) -> list[User]:
        """Fetch every user."""
        rows = self.db.query("SELECT * FROM users", [])
        return [self._row_to_user(r) for r in rows]

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by ID.

        Returns:
            User or None.
        """
        rows = self.db.query("SELECT * FROM users WHERE id=$1", [user_id])
        return self._row_to_user(rows[0]) if rows else None

    def get_user_preferences(self, user_id: int) -> Optional[Preferences]:
        """Read both preference flags, or None if the user does not exist."""
        rows = self.db.query("SELECT sort, filter FROM users WHERE id=$1", [user_id])
        if not rows:
            return None
        return Preferences(sort=bool(rows[0]["sort"]), filter=bool(rows[0]["filter"]))

    def get_user_preference(self, name: str, user_id: int) -> Optional[bool]:
        """
        Read a single preference flag.

        Args:
            name: "sort" or "filter".
            user_id: The user's ID.

        Returns:
            The flag's value, or None if the user does not exist.

        Raises:
            ValueError: If `name` is not a preference.
        """
        if name not in PREFERENCE_NAMES:
            raise ValueError(f"Unknown preference: {name!r}")
        user = self.get_user_by_id(user_id)
        if user is None:
            return None
        return bool(getattr(user, name))

    def update_user_by_id(self, user_id: int, fields: Mapping[str, Any]) -> Optional[User]:
        """
        Apply a partial update to a user.

        Returns:
            The updated user, or None if no user has this id.

        Raises:
            EmptyUpdateError: If `fields` is empty.
            UnknownFieldError: If `fields` names a non-updatable column.
        """
        if self.get_user_by_id(user_id) is None:
            return None

        set_clause, params = build_set_clause(fields, user_id, allowed=USER_UPDATABLE_FIELDS)
        sql = f"UPDATE users {set_clause} RETURNING {_COLUMNS}"
        rows = self.db.query(sql, params)
        return self._row_to_user(rows[0]) if rows else None

    def toggle_preference(self, name: str, user_id: int) -> Optional[User]:
        """
        Flip one preference flag and return the updated user.

        This is a read followed by a separate write, not a single atomic
        statement: two concurrent toggles may both read the same value.
        """
        current = self.get_user_preference(name, user_id)
        if current is None:
            return None
        user = self.update_user_by_id(user_id, {name: not current})
        if user is not None:
            logger.info(f"User #{user_id} set {name}={not current}")
        return user

    @staticmethod
    def _row_to_user(row: Mapping[str, Any]) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            sort=bool(row["sort"]),
            filter=bool(row["filter"]),
        )
