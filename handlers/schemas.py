"""
handlers/schemas.py
-------------------
Request and response bodies for the HTTP API.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


# ── Tasks ─────────────────────────────────────────────────
class TaskCreate(BaseModel):
    user_id: int
    value: str
    due_date: date
    status: bool = False


class TaskUpdate(BaseModel):
    value: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[bool] = None


class TaskRead(BaseModel):
    id: int
    user_id: int
    value: str
    due_date: str
    status: bool

    model_config = ConfigDict(from_attributes=True)


# ── Users ─────────────────────────────────────────────────
class PreferenceToggle(BaseModel):
    option: Literal["sort", "filter"]


class UserRead(BaseModel):
    id: int
    name: str
    sort: bool
    filter: bool

    model_config = ConfigDict(from_attributes=True)
