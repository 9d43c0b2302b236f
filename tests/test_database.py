"""
Tests for the database layer: transactions, schema, migrations and seeding.
"""
import pytest
from sqlalchemy import event, text

from vahub.core.config import Settings
from vahub.db import Database, Repositories, init_schema, seed_database
from vahub.db.database import mask_url
from vahub.db.schema import MIGRATIONS, create_tables, run_migrations


@pytest.fixture
def fresh_db(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'fresh.db'}")
    yield database
    database.dispose()


def _count(database, table):
    return database.execute_raw_sql(f"SELECT COUNT(*) AS n FROM {table}")[0]["n"]


class TestSession:

    def test_commits_on_success(self, fresh_db):
        init_schema(fresh_db)
        with fresh_db.session() as db:
            Repositories(db).plans.create("x", "X", 1, 1, 1, 1, 1)
        assert _count(fresh_db, "plans") == 1

    def test_rolls_back_on_error(self, fresh_db):
        init_schema(fresh_db)
        with pytest.raises(RuntimeError):
            with fresh_db.session() as db:
                repos = Repositories(db)
                repos.subscriptions.replace("employer-1", "pro-plan", "2030-01-01T00:00:00")
                raise RuntimeError("boom")
        assert _count(fresh_db, "subscriptions") == 0

    def test_execute_raw_sql_without_rows(self, fresh_db):
        init_schema(fresh_db)
        assert fresh_db.execute_raw_sql("DELETE FROM plans") == []

    def test_connection_check(self, fresh_db):
        assert fresh_db.test_connection() is True

    def test_display_url_masks_password(self, fresh_db):
        assert mask_url("postgresql://vahub:s3cret@db:5432/vahub") == "postgresql://vahub:****@db:5432/vahub"
        assert fresh_db.display_url == fresh_db.url


class TestSchema:

    def test_init_is_idempotent(self, fresh_db):
        init_schema(fresh_db)
        init_schema(fresh_db)
        tables = {r["name"] for r in fresh_db.execute_raw_sql(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        )}
        assert {"users", "va_profiles", "employer_profiles", "jobs", "job_skills", "va_skills",
                "applications", "messages", "subscriptions", "plans", "admin_logs"} <= tables

    def test_migrations_skip_existing_columns(self, fresh_db):
        create_tables(fresh_db)
        assert run_migrations(fresh_db) == 0

    def test_migrations_add_missing_columns(self, fresh_db):
        with fresh_db.session() as db:
            db.execute(text("CREATE TABLE va_profiles (id TEXT PRIMARY KEY, user_id TEXT NOT NULL, headline TEXT)"))
        create_tables(fresh_db)
        assert run_migrations(fresh_db) == len(MIGRATIONS)

        columns = {r["name"] for r in fresh_db.execute_raw_sql("PRAGMA table_info(va_profiles)")}
        assert {"iq_score", "english_score", "education", "last_active", "monthly_salary"} <= columns

    def test_user_delete_with_foreign_keys_enforced(self, fresh_db):
        @event.listens_for(fresh_db.engine, "connect")
        def enforce_foreign_keys(dbapi_connection, connection_record):
            dbapi_connection.execute("PRAGMA foreign_keys = ON")

        init_schema(fresh_db)
        seed_database(fresh_db, Settings(_env_file=None, seed_demo_data=True))
        with fresh_db.session() as db:
            assert Repositories(db).users.delete("va-demo-1") == 1

        assert fresh_db.execute_raw_sql("PRAGMA foreign_keys")[0]["foreign_keys"] == 1
        assert fresh_db.execute_raw_sql(
            "SELECT COUNT(*) AS n FROM va_profiles WHERE user_id = 'va-demo-1'"
        )[0]["n"] == 1


class TestSeed:

    def test_seed_twice_does_not_duplicate(self, fresh_db):
        settings = Settings(_env_file=None, seed_demo_data=True)
        init_schema(fresh_db)
        seed_database(fresh_db, settings)
        seed_database(fresh_db, settings)

        assert _count(fresh_db, "plans") == 3
        assert _count(fresh_db, "jobs") == 22
        assert _count(fresh_db, "users") == 11
        assert _count(fresh_db, "va_skills") == 26

    def test_seed_resets_admin_password(self, fresh_db):
        init_schema(fresh_db)
        seed_database(fresh_db, Settings(_env_file=None, admin_password="first"))
        seed_database(fresh_db, Settings(_env_file=None, admin_password="second"))
        rows = fresh_db.execute_raw_sql("SELECT password FROM users WHERE role = 'admin'")
        assert rows == [{"password": "second"}]

    def test_without_demo_data(self, fresh_db):
        init_schema(fresh_db)
        seed_database(fresh_db, Settings(_env_file=None, seed_demo_data=False))
        assert _count(fresh_db, "plans") == 3
        assert _count(fresh_db, "users") == 1
        assert _count(fresh_db, "jobs") == 0
