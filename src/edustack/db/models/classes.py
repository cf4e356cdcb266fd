from __future__ import annotations

from typing import ClassVar

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args


class SchoolClass(IntIdMixin, Base):
    __tablename__ = "classes"

    NOTE: ClassVar[str] = (
        "description=Course sections taught in a department for one semester."
    )
    __table_args__ = table_args(NOTE)

    name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    subject: Mapped[str] = mapped_column(sa.Text, nullable=False)
    department: Mapped[str] = mapped_column(sa.Text, nullable=False)
    semester: Mapped[int] = mapped_column(sa.Integer, nullable=False)
    institution_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
