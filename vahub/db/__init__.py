"""
Database module - connection, schema, repositories and seed data.
"""
from vahub.db.database import Database, utcnow_iso
from vahub.db.repositories import Repositories
from vahub.db.schema import init_schema
from vahub.db.seed import seed_database

__all__ = [
    "Database",
    "Repositories",
    "init_schema",
    "seed_database",
    "utcnow_iso",
]
