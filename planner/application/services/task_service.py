"""Task service — business logic for dated tasks."""

from datetime import date
from typing import List, Optional

from planner.core.exceptions import EntityNotFoundException, ValidationException
from planner.domain.models.task import Task
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.repositories.task_repository import TaskRepository
from planner.domain.schemas.task import TaskCreate, TaskUpdate


def _ensure_category_owned(categories: CategoryRepository, user_id: str, category_id: Optional[str]) -> None:
    """A task may only point at one of its owner's categories."""
    if category_id is None:
        return
    if categories.get_owned(category_id, user_id) is None:
        raise ValidationException(
            "Invalid task data",
            details={"fields": [{"field": "categoryId", "message": "Unknown category"}]},
        )


def list_tasks(repo: TaskRepository, user_id: str, day: Optional[date] = None) -> List[Task]:
    if day is None:
        return repo.list_for_owner(user_id)
    return repo.list_for_date(user_id, day)


def create_task(
    repo: TaskRepository,
    categories: CategoryRepository,
    user_id: str,
    body: TaskCreate,
) -> Task:
    _ensure_category_owned(categories, user_id, body.category_id)
    return repo.create(user_id, body)


def update_task(
    repo: TaskRepository,
    categories: CategoryRepository,
    user_id: str,
    task_id: str,
    body: TaskUpdate,
) -> Task:
    if "category_id" in body.model_fields_set:
        _ensure_category_owned(categories, user_id, body.category_id)

    task = repo.update_owned(task_id, user_id, body)
    if task is None:
        raise EntityNotFoundException("Task not found")
    return task


def toggle_task(repo: TaskRepository, user_id: str, task_id: str) -> Task:
    task = repo.toggle_completed(task_id, user_id)
    if task is None:
        raise EntityNotFoundException("Task not found")
    return task


def delete_task(repo: TaskRepository, user_id: str, task_id: str) -> None:
    if not repo.delete_owned(task_id, user_id):
        raise EntityNotFoundException("Task not found")
