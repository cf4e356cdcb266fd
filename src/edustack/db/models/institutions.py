from __future__ import annotations

from typing import ClassVar

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args

INSTITUTION_TYPES = ("university", "college", "school")


class Institution(IntIdMixin, Base):
    __tablename__ = "institutions"

    NOTE: ClassVar[str] = (
        "description=Universities, colleges and schools managed by the tenant. "
        "Referenced by users, students, faculty, classes and timetable entries."
    )
    __table_args__ = table_args(NOTE)

    name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    address: Mapped[str] = mapped_column(sa.Text, nullable=False)
    phone: Mapped[str] = mapped_column(sa.Text, nullable=False)
    email: Mapped[str] = mapped_column(sa.Text, nullable=False)
    type: Mapped[str] = mapped_column(sa.Text, nullable=False, default="university", server_default="university")
