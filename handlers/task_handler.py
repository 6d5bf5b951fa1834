"""
handlers/task_handler.py
------------------------
HTTP routes for tasks. Each route delegates to the TaskRepository and
maps a missing row to 404.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from handlers.dependencies import get_task_repo
from handlers.schemas import TaskCreate, TaskRead, TaskUpdate
from models.task import Task
from repositories.task_repo import TaskRepository

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/{user_id}", response_model=list[TaskRead])
def list_tasks(user_id: int, repo: TaskRepository = Depends(get_task_repo)):
    tasks = repo.list_tasks_for_user(user_id)
    if tasks is None:
        raise HTTPException(status_code=404, detail="User not found")
    return tasks


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreate, repo: TaskRepository = Depends(get_task_repo)):
    task = Task(
        user_id=body.user_id,
        value=body.value,
        due_date=body.due_date.isoformat(),
        status=body.status,
    )
    return repo.create_task(task)


@router.delete("/{task_id}", response_model=TaskRead)
def delete_task(task_id: int, repo: TaskRepository = Depends(get_task_repo)):
    deleted = repo.delete_task_by_id(task_id)
    if deleted is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return deleted


@router.patch("/{task_id}", response_model=TaskRead)
def update_task(task_id: int, body: TaskUpdate, repo: TaskRepository = Depends(get_task_repo)):
    fields = body.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    updated = repo.update_task_by_id(task_id, fields)
    if updated is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return updated
