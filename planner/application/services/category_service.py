"""Category service — business logic for user-owned categories."""

from typing import List

from planner.core.exceptions import EntityNotFoundException
from planner.domain.models.category import Category
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.schemas.category import CategoryCreate, CategoryUpdate


def list_categories(repo: CategoryRepository, user_id: str) -> List[Category]:
    return repo.list_for_owner(user_id)


def create_category(repo: CategoryRepository, user_id: str, body: CategoryCreate) -> Category:
    return repo.create(user_id, body)


def update_category(repo: CategoryRepository, user_id: str, category_id: str, body: CategoryUpdate) -> Category:
    category = repo.update_owned(category_id, user_id, body)
    if category is None:
        raise EntityNotFoundException("Category not found")
    return category


def delete_category(repo: CategoryRepository, user_id: str, category_id: str) -> None:
    """Delete a category; tasks that used it keep existing without one."""
    if not repo.delete_owned(category_id, user_id):
        raise EntityNotFoundException("Category not found")


def provision_default_categories(repo: CategoryRepository, user_id: str) -> List[Category]:
    """Give a new user the starter set; a no-op for anyone already provisioned."""
    return repo.provision_defaults(user_id)
