"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: owners of task lists and their display preferences
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    name            TEXT NOT NULL,
    sort            BOOLEAN NOT NULL DEFAULT FALSE,
    filter          BOOLEAN NOT NULL DEFAULT FALSE
);

-- Tasks table: one row per to-do item
CREATE TABLE IF NOT EXISTS tasks (
    id              SERIAL PRIMARY KEY,
    user_id         INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    value           TEXT NOT NULL,
    due_date        DATE NOT NULL,
    status          BOOLEAN NOT NULL DEFAULT FALSE
);

CREATE INDEX IF NOT EXISTS idx_tasks_user ON tasks(user_id);
"""


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        db.query(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from config import DB_POOL_MAX, DB_POOL_MIN, require_database_url

    with Database(require_database_url(), DB_POOL_MIN, DB_POOL_MAX) as database:
        create_tables(database)
    print("Database schema created successfully.")
