# tests/test_migrate_schema.py

from __future__ import annotations

from pathlib import Path

from sqlalchemy import inspect, text

from planner.infrastructure.database import build_engine
from scripts.migrate_schema import migrate, pending_columns


def test_adds_missing_columns_to_legacy_users_table(tmp_path: Path) -> None:
    engine = build_engine(f"sqlite:///{tmp_path / 'legacy.sqlite3'}")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE users (id VARCHAR PRIMARY KEY, email VARCHAR NOT NULL)"))
        conn.execute(text("INSERT INTO users (id, email) VALUES ('u1', 'alice@example.com')"))

    applied = migrate(engine)

    assert "users.password_hash" in applied
    assert "users.categories_provisioned_at" in applied
    columns = {c["name"] for c in inspect(engine).get_columns("users")}
    assert {"password_hash", "first_name", "categories_provisioned_at"} <= columns
    with engine.connect() as conn:
        assert conn.execute(text("SELECT email FROM users")).scalar_one() == "alice@example.com"
    engine.dispose()


def test_current_schema_needs_nothing(engine) -> None:
    assert pending_columns(engine) == []
    assert migrate(engine) == []
