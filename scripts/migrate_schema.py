"""Apply additive schema changes to an existing planner database.

Only adds what is missing; never drops or rewrites existing data.
"""

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from planner.infrastructure.database import engine as default_engine

# (table, column, DDL type) — columns added over time to tables that already existed
ADDITIVE_COLUMNS = [
    ("users", "password_hash", "VARCHAR(255)"),
    ("users", "first_name", "VARCHAR(200)"),
    ("users", "last_name", "VARCHAR(200)"),
    ("users", "profile_image_url", "VARCHAR(500)"),
    ("users", "categories_provisioned_at", "TIMESTAMP"),
    ("tasks", "due_time", "VARCHAR(5)"),
    ("tasks", "notes", "TEXT"),
]


def pending_columns(engine: Engine) -> list[tuple[str, str, str]]:
    inspector = inspect(engine)
    tables = set(inspector.get_table_names())
    missing = []
    for table, column, ddl_type in ADDITIVE_COLUMNS:
        if table not in tables:
            continue
        existing = {c["name"] for c in inspector.get_columns(table)}
        if column not in existing:
            missing.append((table, column, ddl_type))
    return missing


def migrate(engine: Engine = default_engine) -> list[str]:
    applied = []
    missing = pending_columns(engine)
    if not missing:
        print("Schema is up to date.")
        return applied

    with engine.begin() as conn:
        for table, column, ddl_type in missing:
            print(f"Adding '{table}.{column}' column...")
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {ddl_type}"))
            applied.append(f"{table}.{column}")

    print(f"Migration successful: added {', '.join(applied)}.")
    return applied


if __name__ == "__main__":
    migrate()
