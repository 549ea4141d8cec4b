"""Category API routes — CRUD for the caller's categories."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from planner.interfaces.api.deps import get_current_user
from planner.interfaces.deps import get_category_repository
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.models.user import User
from planner.domain.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from planner.application.services.category_service import (
    create_category,
    delete_category,
    list_categories,
    update_category,
)

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryRead])
def list_my_categories(
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return [CategoryRead.model_validate(c) for c in list_categories(repo, user.id)]


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_my_category(
    body: CategoryCreate,
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return CategoryRead.model_validate(create_category(repo, user.id, body))


@router.patch("/{category_id}", response_model=CategoryRead)
def update_my_category(
    category_id: str,
    body: CategoryUpdate,
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return CategoryRead.model_validate(update_category(repo, user.id, category_id, body))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_my_category(
    category_id: str,
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    delete_category(repo, user.id, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
