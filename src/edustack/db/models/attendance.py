from __future__ import annotations

from typing import ClassVar, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args

ATTENDANCE_STATUSES = ("present", "absent", "late")


class Attendance(IntIdMixin, Base):
    __tablename__ = "attendance"

    NOTE: ClassVar[str] = (
        "description=Per-day attendance marks for a student in a class. "
        "Duplicate marks for the same student, class and date are allowed."
    )
    __table_args__ = table_args(NOTE)

    student_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
    class_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
    date: Mapped[str] = mapped_column(sa.Text, nullable=False)
    status: Mapped[str] = mapped_column(sa.Text, nullable=False, default="present", server_default="present")
    marked_by: Mapped[Optional[int]] = mapped_column(sa.Integer)
