"""
Shared FastAPI dependencies.

The Database and Settings live on app.state (set by create_app); every
request gets its own session, and therefore its own transaction.
"""
from typing import Iterator

from fastapi import Request, Depends

from vahub.core.config import Settings
from vahub.db.database import Database
from vahub.db.repositories import Repositories


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repositories(database: Database = Depends(get_database)) -> Iterator[Repositories]:
    """
    Dependency for route injection.
    Usage:
        @router.get("/users")
        def get_users(repos: Repositories = Depends(get_repositories)):
            ...

    Commits when the handler returns, rolls back if it raises.
    """
    with database.session() as db:
        yield Repositories(db)
