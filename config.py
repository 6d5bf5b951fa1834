"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DATABASE_URL: str = os.getenv("DATABASE_URL", "").strip()

DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── HTTP server ───────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "4000"))


def require_database_url() -> str:
    """
    Return the configured connection string.

    Raises:
        RuntimeError: If DATABASE_URL is missing, so startup aborts.
    """
    if not DATABASE_URL:
        raise RuntimeError("No DATABASE_URL env var provided. Did you create an .env file?")
    return DATABASE_URL
