"""
db/query_builder.py
-------------------
Builds positionally-parameterized SQL fragments ($1, $2, ...) for
partial updates and for per-user task list preferences.
"""

from typing import Any, Iterable, Mapping, Optional

from db.errors import EmptyUpdateError, UnknownFieldError


def build_set_clause(
    fields: Mapping[str, Any],
    id: int,
    allowed: Optional[Iterable[str]] = None,
) -> tuple[str, list]:
    """
    Build a ``SET ... WHERE id=$n`` fragment from a partial field map.

    Fields are numbered in insertion order and ``id`` is always the last
    parameter.

    Args:
        fields: Column name -> new value. Must not be empty.
        id: Primary key of the row to update.
        allowed: Optional column allow-list; column names are interpolated
            into the SQL text, so callers should always pass one.

    Returns:
        Tuple of (text, params), e.g.
        ``("SET value = $1, status = $2 WHERE id=$3", ["x", True, 7])``.

    Raises:
        EmptyUpdateError: If ``fields`` is empty.
        UnknownFieldError: If a column is not in ``allowed``.
    """
    if not fields:
        raise EmptyUpdateError("Partial update must contain at least one field.")

    if allowed is not None:
        allowed = set(allowed)
        unknown = [name for name in fields if name not in allowed]
        if unknown:
            raise UnknownFieldError(f"Cannot update field(s): {', '.join(unknown)}")

    columns = ", ".join(f"{name} = ${index}" for index, name in enumerate(fields, start=1))
    text = f"SET {columns} WHERE id=${len(fields) + 1}"

    params = list(fields.values())
    params.append(id)
    return text, params


def build_filter_order(prefs: Mapping[str, bool], offset: int = 1) -> tuple[str, list]:
    """
    Build the WHERE/ORDER BY suffix for a user's task list.

    ``offset`` is the number of placeholders the base query already uses
    (the task list query binds user_id to $1).
    """
    text = ""
    params: list = []

    # filter hides completed tasks
    if prefs["filter"]:
        text += f" AND status=${offset + 1}"
        params.append(False)

    if prefs["sort"]:
        text += " ORDER BY due_date"
    else:
        text += " ORDER BY id DESC"

    return text, params
