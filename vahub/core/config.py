"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

Every setting can be overridden with a VAHUB_ prefixed env var,
e.g. VAHUB_DATABASE_URL=sqlite:///./other.db
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (single SQLite file unless overridden)
    database_url: str = "sqlite:///./vahub.db"
    debug: bool = False

    # Seed demo accounts, VAs and jobs at startup
    seed_demo_data: bool = True

    # Built-in admin account
    admin_email: str = "admin@vahub.com"
    admin_password: str = "Memyselfandi!1"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # External identity provider (Supabase auth)
    identity_url: str = ""
    identity_key: str = ""

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    # Client
    message_poll_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_prefix="VAHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
