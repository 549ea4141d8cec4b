# tests/test_repositories.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from planner.domain.models.category import Category
from planner.domain.models.task import Task
from planner.domain.models.user import User
from planner.infrastructure.repositories.category_repository import (
    DEFAULT_CATEGORIES,
    SQLAlchemyCategoryRepository,
)
from planner.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository


def make_user(db: Session, email: str = "alice@example.com") -> User:
    user = User(email=email, password_hash="x")
    db.add(user)
    db.commit()
    return user


def test_scoped_reads_hide_other_owners(db: Session) -> None:
    alice, bob = make_user(db), make_user(db, "bob@example.com")
    tasks = SQLAlchemyTaskRepository(db)
    task = tasks.create(alice.id, {"text": "mine", "date": date(2024, 5, 1)})

    assert tasks.get_owned(task.id, bob.id) is None
    assert tasks.update_owned(task.id, bob.id, {"text": "stolen"}) is None
    assert tasks.delete_owned(task.id, bob.id) is False
    assert tasks.list_for_owner(bob.id) == []
    assert tasks.get_owned(task.id, alice.id).text == "mine"


def test_update_cannot_reassign_owner(db: Session) -> None:
    alice, bob = make_user(db), make_user(db, "bob@example.com")
    tasks = SQLAlchemyTaskRepository(db)
    task = tasks.create(alice.id, {"text": "mine", "date": date(2024, 5, 1)})

    updated = tasks.update_owned(task.id, alice.id, {"user_id": bob.id, "text": "still mine"})

    assert updated.user_id == alice.id
    assert updated.text == "still mine"


@pytest.mark.parametrize("toggles", [7, 8])
def test_concurrent_toggles_are_not_lost(db: Session, session_factory: sessionmaker, toggles: int) -> None:
    user = make_user(db)
    task = SQLAlchemyTaskRepository(db).create(user.id, {"text": "flip", "date": date(2024, 5, 1)})

    def toggle(_: int) -> bool:
        session = session_factory()
        try:
            return SQLAlchemyTaskRepository(session).toggle_completed(task.id, user.id) is not None
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=toggles) as pool:
        results = list(pool.map(toggle, range(toggles)))

    assert all(results)
    db.expire_all()
    assert db.get(Task, task.id).completed is (toggles % 2 == 1)


def test_toggle_missing_task_returns_none(db: Session) -> None:
    user = make_user(db)

    assert SQLAlchemyTaskRepository(db).toggle_completed("missing", user.id) is None


def test_provision_defaults_is_idempotent(db: Session) -> None:
    user = make_user(db)
    categories = SQLAlchemyCategoryRepository(db)

    first = categories.provision_defaults(user.id)
    second = categories.provision_defaults(user.id)

    assert len(first) == len(DEFAULT_CATEGORIES)
    assert second == []
    assert len(categories.list_for_owner(user.id)) == 4


def test_concurrent_provisioning_creates_one_set(db: Session, session_factory: sessionmaker) -> None:
    user = make_user(db)

    def provision(_: int) -> int:
        session = session_factory()
        try:
            return len(SQLAlchemyCategoryRepository(session).provision_defaults(user.id))
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=6) as pool:
        created = list(pool.map(provision, range(6)))

    assert sorted(created) == [0, 0, 0, 0, 0, 4]
    assert db.query(Category).filter(Category.user_id == user.id).count() == 4


def test_category_delete_nullifies_tasks_atomically(db: Session) -> None:
    user = make_user(db)
    categories = SQLAlchemyCategoryRepository(db)
    tasks = SQLAlchemyTaskRepository(db)
    category = categories.create(user.id, {"name": "work", "emoji": "💼", "color": "blue"})
    task = tasks.create(user.id, {"text": "report", "date": date(2024, 5, 1), "category_id": category.id})
    category_id, task_id = category.id, task.id

    assert categories.delete_owned(category_id, user.id) is True

    db.expire_all()
    remaining = db.get(Task, task_id)
    assert remaining is not None
    assert remaining.category_id is None
    assert db.get(Category, category_id) is None


def test_failed_category_delete_keeps_task_reference(db: Session, engine: Engine) -> None:
    user = make_user(db)
    categories = SQLAlchemyCategoryRepository(db)
    category = categories.create(user.id, {"name": "work", "emoji": "💼", "color": "blue"})
    task = SQLAlchemyTaskRepository(db).create(
        user.id, {"text": "report", "date": date(2024, 5, 1), "category_id": category.id}
    )
    category_id, task_id = category.id, task.id

    def fail_category_delete(conn, cursor, statement, parameters, context, executemany):
        if statement.startswith("DELETE FROM categories"):
            raise RuntimeError("disk full")

    event.listen(engine, "before_cursor_execute", fail_category_delete)
    try:
        with pytest.raises(Exception, match="disk full"):
            categories.delete_owned(category_id, user.id)
    finally:
        event.remove(engine, "before_cursor_execute", fail_category_delete)

    db.expire_all()
    assert db.get(Task, task_id).category_id == category_id
    assert db.get(Category, category_id) is not None


def test_deleting_user_cascades_to_owned_rows(db: Session) -> None:
    user = make_user(db)
    SQLAlchemyCategoryRepository(db).provision_defaults(user.id)
    SQLAlchemyTaskRepository(db).create(user.id, {"text": "x", "date": date(2024, 5, 1)})

    db.delete(user)
    db.commit()

    assert db.query(Category).count() == 0
    assert db.query(Task).count() == 0
