# =============================================================================
# Application Configuration — Pydantic Settings
# =============================================================================
#
# DESIGN DECISION: Pydantic V2's `BaseSettings` for configuration:
# 1. Type-safe values validated at startup
# 2. Automatic loading from environment variables
# 3. Support for .env files (via `env_file` in model_config)
#
# Priority order (highest first):
#   1. Environment variables (e.g., `API_KEY=...`)
#   2. Values from the .env file
#   3. Default values defined below
#
# USAGE:
#   from app.config import get_settings
#   app = create_app(get_settings())
# =============================================================================

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Defaults are suitable for local development against a SQLite file.
    """

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    app_name: str = "Users API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    # A single shared secret, passed by clients as the `api_key` query
    # parameter. It is handed to the auth middleware when the app is built
    # and compared on every request.
    # -------------------------------------------------------------------------
    api_key: str = "kyoubou"

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------
    # Format: sqlite+aiosqlite:///path/to/file.db
    # The `+aiosqlite` part tells SQLAlchemy to use the async driver.
    # `sqlite+aiosqlite://` (no path) is an in-memory database.
    # -------------------------------------------------------------------------
    database_url: str = "sqlite+aiosqlite:///./data/users.db"

    # Create the users table on startup if it does not exist yet.
    create_tables: bool = True

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    cors_max_age: int = 86400  # seconds browsers may cache a preflight

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Create and cache a Settings instance.

    Tests build their own instance instead:
        app = create_app(Settings(database_url="sqlite+aiosqlite://"))
    """
    return Settings()
