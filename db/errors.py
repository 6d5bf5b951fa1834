"""
db/errors.py
------------
Exceptions raised by the database layer.

"Not found" is never an exception here: repositories return None for a
missing row. These types cover the cases that are not absence.
"""


class StoreError(Exception):
    """The database rejected a statement or could not be reached."""


class EmptyUpdateError(ValueError):
    """A partial update carried no fields, so no SET clause can be built."""


class UnknownFieldError(ValueError):
    """A partial update named a column that may not be updated."""


class ConstraintError(StoreError):
    """A statement violated a constraint (e.g. a task for a missing user)."""
