"""Task API routes — list by day, create, edit, toggle, delete."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from planner.interfaces.api.deps import get_current_user
from planner.interfaces.deps import get_category_repository, get_task_repository
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.repositories.task_repository import TaskRepository
from planner.domain.models.user import User
from planner.domain.schemas.task import TaskCreate, TaskRead, TaskUpdate
from planner.application.services.task_service import (
    create_task,
    delete_task,
    list_tasks,
    toggle_task,
    update_task,
)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskRead])
def list_my_tasks(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD"),
    repo: TaskRepository = Depends(get_task_repository),
    user: User = Depends(get_current_user),
):
    """List the caller's tasks, optionally for a single calendar date."""
    return [TaskRead.model_validate(t) for t in list_tasks(repo, user.id, day)]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_my_task(
    body: TaskCreate,
    repo: TaskRepository = Depends(get_task_repository),
    categories: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return TaskRead.model_validate(create_task(repo, categories, user.id, body))


@router.patch("/{task_id}", response_model=TaskRead)
def update_my_task(
    task_id: str,
    body: TaskUpdate,
    repo: TaskRepository = Depends(get_task_repository),
    categories: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return TaskRead.model_validate(update_task(repo, categories, user.id, task_id, body))


@router.patch("/{task_id}/toggle", response_model=TaskRead)
def toggle_my_task(
    task_id: str,
    repo: TaskRepository = Depends(get_task_repository),
    user: User = Depends(get_current_user),
):
    return TaskRead.model_validate(toggle_task(repo, user.id, task_id))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_my_task(
    task_id: str,
    repo: TaskRepository = Depends(get_task_repository),
    user: User = Depends(get_current_user),
):
    delete_task(repo, user.id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
