"""
Database schema - table creation and best-effort column migrations.

Timestamps are stored as ISO-8601 text and flags as 0/1 integers, so the
same DDL runs on SQLite and PostgreSQL.
"""
import logging

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from vahub.db.database import Database

logger = logging.getLogger(__name__)


TABLES = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        role TEXT NOT NULL CHECK (role IN ('admin', 'employer', 'va')),
        name TEXT NOT NULL,
        email TEXT UNIQUE NOT NULL,
        password TEXT NOT NULL,
        status TEXT DEFAULT 'pending' CHECK (status IN ('pending', 'approved', 'suspended')),
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS va_profiles (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        headline TEXT,
        bio TEXT,
        hourly_rate REAL,
        monthly_salary REAL,
        availability TEXT,
        experience_years INTEGER,
        id_proof_score INTEGER DEFAULT 0,
        iq_score INTEGER DEFAULT 0,
        english_score INTEGER DEFAULT 0,
        education TEXT,
        last_active TEXT,
        intro_video_url TEXT,
        resume_url TEXT,
        profile_views INTEGER DEFAULT 0,
        is_featured INTEGER DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS employer_profiles (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        company_name TEXT,
        company_description TEXT,
        website TEXT,
        industry TEXT,
        team_size TEXT,
        logo_url TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS jobs (
        id TEXT PRIMARY KEY,
        employer_id TEXT NOT NULL,
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        salary_min REAL,
        salary_max REAL,
        job_type TEXT,
        experience_level TEXT,
        status TEXT DEFAULT 'pending' CHECK (status IN ('pending', 'approved', 'rejected', 'closed')),
        is_featured INTEGER DEFAULT 0,
        rejection_reason TEXT,
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS admin_logs (
        id TEXT PRIMARY KEY,
        admin_id TEXT NOT NULL,
        action_type TEXT NOT NULL,
        target_user_id TEXT,
        description TEXT,
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS applications (
        id TEXT PRIMARY KEY,
        job_id TEXT NOT NULL,
        va_id TEXT NOT NULL,
        cover_letter TEXT,
        status TEXT DEFAULT 'applied' CHECK (status IN ('applied', 'shortlisted', 'rejected', 'hired')),
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS plans (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        price REAL NOT NULL,
        job_post_limit INTEGER,
        messaging_limit INTEGER,
        candidate_unlock_limit INTEGER,
        featured_jobs_limit INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS subscriptions (
        id TEXT PRIMARY KEY,
        employer_id TEXT NOT NULL,
        plan_id TEXT NOT NULL,
        status TEXT,
        current_period_end TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS messages (
        id TEXT PRIMARY KEY,
        sender_id TEXT NOT NULL,
        receiver_id TEXT NOT NULL,
        message_body TEXT NOT NULL,
        is_flagged INTEGER DEFAULT 0,
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS va_skills (
        id TEXT PRIMARY KEY,
        va_id TEXT NOT NULL,
        skill_name TEXT NOT NULL,
        years_experience TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS job_skills (
        id TEXT PRIMARY KEY,
        job_id TEXT NOT NULL,
        skill_name TEXT NOT NULL
    )
    """,
]

# Columns added after the first release; older database files lack them
MIGRATIONS = [
    "ALTER TABLE va_profiles ADD COLUMN id_proof_score INTEGER DEFAULT 0",
    "ALTER TABLE va_profiles ADD COLUMN iq_score INTEGER DEFAULT 0",
    "ALTER TABLE va_profiles ADD COLUMN english_score INTEGER DEFAULT 0",
    "ALTER TABLE va_profiles ADD COLUMN education TEXT",
    "ALTER TABLE va_profiles ADD COLUMN last_active TEXT",
    "ALTER TABLE va_profiles ADD COLUMN monthly_salary REAL",
]


def create_tables(database: Database):
    """Create every table that does not exist yet."""
    with database.session() as db:
        for ddl in TABLES:
            db.execute(text(ddl))


def run_migrations(database: Database) -> int:
    """
    Apply each column migration in its own transaction.
    A failure (normally "duplicate column") is ignored.

    Returns:
        Number of migrations that actually changed the schema
    """
    applied = 0
    for statement in MIGRATIONS:
        try:
            with database.session() as db:
                db.execute(text(statement))
            applied += 1
        except DBAPIError:
            logger.debug("Skipped migration (already applied): %s", statement)
    return applied


def init_schema(database: Database):
    create_tables(database)
    applied = run_migrations(database)
    if applied:
        logger.info("Applied %d column migration(s)", applied)
