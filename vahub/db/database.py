"""
Database connection - one engine and session factory per application.

The Database object is created once by the app factory and handed to request
handlers through FastAPI dependencies, never imported as a global.
"""
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import create_engine, make_url, text
from sqlalchemy.orm import sessionmaker, Session

logger = logging.getLogger(__name__)


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string (the stored timestamp format)."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="microseconds")


def mask_url(url: str) -> str:
    """The database URL with its password masked as ****, safe to print."""
    parsed = make_url(url)
    if parsed.password is not None:
        parsed = parsed.set(password="****")
    return parsed.render_as_string(hide_password=False)


class Database:
    """Engine plus session factory for a single database URL."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if url.startswith("sqlite"):
            # Sessions are opened in the threadpool and used on the event loop
            self.engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})
        else:
            self.engine = create_engine(url, pool_size=5, max_overflow=10, echo=echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def display_url(self) -> str:
        return mask_url(self.url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Context manager for database sessions.
        Usage:
            with database.session() as db:
                db.execute(text("SELECT * FROM users"))

        Everything inside the block is one transaction: committed on normal
        exit, rolled back if anything raises.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def execute_raw_sql(self, sql: str, params: dict = None) -> list:
        """Execute raw SQL in its own transaction and return rows as dicts."""
        with self.session() as db:
            result = db.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    def test_connection(self) -> bool:
        """Return True if the database answers SELECT 1."""
        try:
            rows = self.execute_raw_sql("SELECT 1 AS test")
            return rows[0]["test"] == 1
        except Exception as e:
            logger.error("Database connection failed: %s", e)
            return False

    def dispose(self):
        self.engine.dispose()
