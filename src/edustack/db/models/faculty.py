from __future__ import annotations

from typing import ClassVar

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args


class Faculty(IntIdMixin, Base):
    __tablename__ = "faculty"

    NOTE: ClassVar[str] = (
        "description=Teaching staff. "
        "Employee ids are unique; each member belongs to one institution."
    )
    __table_args__ = table_args(NOTE)

    full_name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    employee_id: Mapped[str] = mapped_column(sa.Text, nullable=False, unique=True)
    email: Mapped[str] = mapped_column(sa.Text, nullable=False)
    department: Mapped[str] = mapped_column(sa.Text, nullable=False)
    designation: Mapped[str] = mapped_column(sa.Text, nullable=False)
    institution_id: Mapped[int] = mapped_column(sa.Integer, nullable=False, index=True)
