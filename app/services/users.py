# =============================================================================
# User Service — One Statement per Operation
# =============================================================================
#
# Each function issues exactly one SQL statement against the users table:
#
#   list_users   SELECT id, name, email, vec FROM users
#   create_user  INSERT INTO users (name, email, vec) VALUES (?, ?, ?)
#   get_user     SELECT id, name, email, vec FROM users WHERE id = ?
#   update_user  UPDATE users SET name = ?, email = ?, vec = ? WHERE id = ?
#   delete_user  DELETE FROM users WHERE id = ?
#
# Ids taken from the URL path arrive as text and are bound as-is; an id that
# matches no row simply finds nothing (404 on read, no-op on write).
#
# Vectors are encoded BEFORE the statement runs, so a malformed vector never
# produces a partial write.
# =============================================================================

from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User
from app.services.vectors import encode_vec

logger = logging.getLogger(__name__)


async def list_users(session: AsyncSession) -> list[User]:
    """Return every user row."""
    result = await session.execute(select(User))
    return list(result.scalars().all())


async def get_user(session: AsyncSession, user_id: str) -> User | None:
    """Return the user with `user_id`, or None."""
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalars().first()


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    vec: list | None = None,
) -> int:
    """Insert a user and return the database-assigned id."""
    user = User(name=name, email=email, vec=encode_vec(vec))
    session.add(user)
    await session.flush()  # Get the ID before commit
    await session.commit()

    logger.info("User created: id=%d", user.id)
    return user.id


async def update_user(
    session: AsyncSession,
    user_id: str,
    name: str,
    email: str,
    vec: list | None = None,
) -> None:
    """Replace name, email and vec of `user_id`. No-op if it does not exist."""
    stmt = (
        update(User)
        .where(User.id == user_id)
        .values(name=name, email=email, vec=encode_vec(vec))
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    await session.commit()

    logger.info("User updated: id=%s, rows=%d", user_id, result.rowcount)


async def delete_user(session: AsyncSession, user_id: str) -> None:
    """Delete `user_id`. Deleting a missing id is not an error."""
    stmt = (
        delete(User)
        .where(User.id == user_id)
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    await session.commit()

    logger.info("User deleted: id=%s, rows=%d", user_id, result.rowcount)
