from __future__ import annotations

from typing import ClassVar

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


class TimetableEntry(IntIdMixin, Base):
    __tablename__ = "timetable"

    NOTE: ClassVar[str] = (
        "description=Weekly schedule slots linking a class, a faculty member and a room. "
        "Overlapping slots are not checked."
    )
    __table_args__ = table_args(NOTE)

    class_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
    faculty_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
    subject: Mapped[str] = mapped_column(sa.Text, nullable=False)
    day_of_week: Mapped[str] = mapped_column(sa.Text, nullable=False)
    start_time: Mapped[str] = mapped_column(sa.Text, nullable=False)
    end_time: Mapped[str] = mapped_column(sa.Text, nullable=False)
    room: Mapped[str] = mapped_column(sa.Text, nullable=False)
    institution_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
