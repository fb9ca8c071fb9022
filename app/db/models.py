# =============================================================================
# Database Models — SQLAlchemy ORM
# =============================================================================
#
# SCHEMA:
#
# ┌──────────────────────────────┐
# │  users                       │
# ├──────────────────────────────┤
# │ id (PK, autoincrement)       │
# │ name (text, not null)        │
# │ email (text, not null)       │
# │ vec (text, nullable)         │
# └──────────────────────────────┘
#
# `vec` holds a JSON-encoded array of numbers (e.g. "[1.5,-2,3]"). NULL
# means "no vector", which is distinct from the empty array "[]".
# Encoding/decoding lives in app/services/vectors.py.
# =============================================================================

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


class User(Base):
    """A user row. `id` is assigned by the database and never updated."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    vec: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
