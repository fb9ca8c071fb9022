# =============================================================================
# Database Package
# =============================================================================
# Provides async SQLAlchemy engine, session management, and the ORM model.
#
# Key exports:
#   - get_async_session: FastAPI dependency for database sessions
#   - Base: SQLAlchemy declarative base
#   - User: ORM model for the users table
# =============================================================================
