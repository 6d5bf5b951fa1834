"""
main.py
-------
Entry point for the TodoList API.

Responsibilities:
    - Open the database connection pool at startup and close it at shutdown.
    - Build the FastAPI application with all routers.
    - Map database-layer errors to HTTP responses.
    - Start the uvicorn server.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import DB_POOL_MAX, DB_POOL_MIN, HOST, PORT, require_database_url
from db.connection import Database
from db.errors import ConstraintError, EmptyUpdateError, StoreError, UnknownFieldError
from db.init_db import create_tables
from handlers import task_handler, user_handler
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(database: Optional[Database] = None, init_schema: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        database: The Database to serve from. When omitted, one is built
            from DATABASE_URL at startup.
        init_schema: Create missing tables on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── 1. Database setup ─────────────────────────────
        db = database if database is not None else Database(require_database_url(), DB_POOL_MIN, DB_POOL_MAX)
        logger.info("Initializing database...")
        try:
            db.open()
            if init_schema:
                create_tables(db)
            app.state.db = db
            yield
        finally:
            # ── 2. Cleanup on shutdown ────────────────────
            db.close()
            logger.info("TodoList API stopped.")

    app = FastAPI(title="TodoList API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(task_handler.router)
    app.include_router(user_handler.router)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        # details are already logged by the connection layer
        return JSONResponse(status_code=503, content={"detail": "Database unavailable"})

    @app.exception_handler(ConstraintError)
    async def constraint_error_handler(request: Request, exc: ConstraintError):
        return JSONResponse(status_code=422, content={"detail": "Request violates a data constraint"})

    @app.exception_handler(EmptyUpdateError)
    @app.exception_handler(UnknownFieldError)
    async def bad_update_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/")
    def read_root():
        return {
            "message": "TodoList API",
            "routes": [
                "GET /tasks/{user_id}",
                "POST /tasks",
                "PATCH /tasks/{id}",
                "DELETE /tasks/{id}",
                "GET /users",
                "GET /users/{id}",
                "PATCH /users/{id}",
            ],
        }

    return app


def main() -> None:
    """Validate configuration and run the server."""
    # abort before binding the port if the store is not configured
    require_database_url()
    logger.info(f"Server is listening on port {PORT}!")
    uvicorn.run(create_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    main()
