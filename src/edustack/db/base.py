# src/edustack/db/base.py
from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# -----------------------------------------------------------------------------
# Declarative Base with naming conventions (great for Alembic autogenerate)
# -----------------------------------------------------------------------------
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Shared declarative base for all models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class IntIdMixin:
    """Store-assigned integer surrogate key."""
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


def table_args(description: str) -> dict:
    # sqlite would otherwise hand out the id of a deleted last row again
    return {"comment": description, "sqlite_autoincrement": True}


__all__ = ["Base", "IntIdMixin", "NAMING_CONVENTION", "table_args"]
