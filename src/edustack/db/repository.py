# src/edustack/db/repository.py
"""Data-access contract: list / create / delete per entity kind.

Each request gets its own :class:`Storage` bound to one ``AsyncSession``.
Every write is a single statement committed immediately; nothing here
retries, caches or spans more than one request. Unique-column violations
raised by the store are translated to :class:`~edustack.errors.DuplicateError`
so callers see the same error whether a pre-check or the constraint caught it.
"""
from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Sequence, Type, TypeVar

import sqlalchemy as sa
from fastapi import Depends
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from edustack.app_logger import get_logger
from edustack.db.base import Base
from edustack.db.models import (
    Attendance,
    Faculty,
    Institution,
    SchoolClass,
    Student,
    TimetableEntry,
    User,
)
from edustack.db.session import get_session
from edustack.errors import DuplicateError

log = get_logger("repository")

ModelT = TypeVar("ModelT", bound=Base)

RECENT_ATTENDANCE_LIMIT = 10


class Repository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT], session: AsyncSession):
        self.model = model
        self.session = session

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    async def list(self) -> Sequence[ModelT]:
        res = await self.session.execute(sa.select(self.model).order_by(self.model.id))
        return res.scalars().all()

    async def get(self, item_id: int) -> Optional[ModelT]:
        return await self.session.get(self.model, item_id)

    async def count(self) -> int:
        res = await self.session.execute(sa.select(sa.func.count()).select_from(self.model))
        return int(res.scalar_one())

    async def create(self, fields: Mapping[str, Any]) -> ModelT:
        obj = self.model(**fields)
        self.session.add(obj)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            dup = self._duplicate_from(exc)
            if dup is None:
                raise
            log.info("Duplicate %s rejected by store: field=%s", self.table_name, dup.field)
            raise dup from exc
        await self.session.refresh(obj)
        log.debug("Created %s id=%s", self.table_name, obj.id)
        return obj

    async def delete(self, item_id: int) -> bool:
        """Delete by id. Returns False when no such row existed."""
        res = await self.session.execute(sa.delete(self.model).where(self.model.id == item_id))
        await self.session.commit()
        removed = (res.rowcount or 0) > 0
        if not removed:
            log.info("Delete of missing %s id=%s", self.table_name, item_id)
        return removed

    def _duplicate_from(self, exc: IntegrityError) -> Optional[DuplicateError]:
        message = str(getattr(exc, "orig", None) or exc)
        for col in self.model.__table__.columns:
            if col.unique and col.name in message:
                label = col.name.replace("_", " ").capitalize()
                return DuplicateError(f"{label} already exists", field=to_camel(col.name))
        return None


class UserRepository(Repository[User]):
    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_username(self, username: str) -> Optional[User]:
        res = await self.session.execute(sa.select(User).where(User.username == username))
        return res.scalars().first()

    async def list_public(self) -> list[dict[str, Any]]:
        """Every user as a plain mapping, without the password hash."""
        return [
            {c.key: getattr(u, c.key) for c in User.__table__.columns if c.key != "password"}
            for u in await self.list()
        ]


class Storage:
    """One repository per entity kind, sharing a single session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.institutions = Repository(Institution, session)
        self.students = Repository(Student, session)
        self.faculty = Repository(Faculty, session)
        self.classes = Repository(SchoolClass, session)
        self.attendance = Repository(Attendance, session)
        self.timetable = Repository(TimetableEntry, session)

    def for_model(self, model: type) -> Repository:
        for repo in (
            self.users,
            self.institutions,
            self.students,
            self.faculty,
            self.classes,
            self.attendance,
            self.timetable,
        ):
            if repo.model is model:
                return repo
        raise LookupError(f"No repository for {model.__name__}")

    async def dashboard_stats(self) -> dict:
        # Highest ids first: ids are assigned in insertion order and never reused.
        res = await self.session.execute(
            sa.select(Attendance).order_by(Attendance.id.desc()).limit(RECENT_ATTENDANCE_LIMIT)
        )
        return {
            "total_students": await self.students.count(),
            "total_faculty": await self.faculty.count(),
            "total_classes": await self.classes.count(),
            "total_institutions": await self.institutions.count(),
            "recent_attendance": list(res.scalars().all()),
        }


async def get_storage(session: AsyncSession = Depends(get_session)) -> Storage:
    return Storage(session)


__all__ = ["Repository", "UserRepository", "Storage", "get_storage", "RECENT_ATTENDANCE_LIMIT"]
