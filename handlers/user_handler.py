"""
handlers/user_handler.py
------------------------
HTTP routes for users and their task list preferences.
"""

from fastapi import APIRouter, Depends, HTTPException

from handlers.dependencies import get_user_repo
from handlers.schemas import PreferenceToggle, UserRead
from repositories.user_repo import UserRepository

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead])
def list_users(repo: UserRepository = Depends(get_user_repo)):
    return repo.list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, repo: UserRepository = Depends(get_user_repo)):
    user = repo.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserRead)
def toggle_preference(
    user_id: int,
    body: PreferenceToggle,
    repo: UserRepository = Depends(get_user_repo),
):
    """Flip the user's `sort` or `filter` preference."""
    user = repo.toggle_preference(body.option, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
