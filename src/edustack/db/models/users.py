from __future__ import annotations

from typing import ClassVar, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from edustack.db.base import Base, IntIdMixin, table_args


class User(IntIdMixin, Base):
    __tablename__ = "users"

    NOTE: ClassVar[str] = (
        "description=Login accounts for the administrative dashboard. "
        "Usernames are unique; passwords are stored as salted one-way hashes."
    )
    __table_args__ = table_args(NOTE)

    username: Mapped[str] = mapped_column(sa.Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(sa.Text, nullable=False)
    email: Mapped[str] = mapped_column(sa.Text, nullable=False)
    full_name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    role: Mapped[str] = mapped_column(sa.Text, nullable=False, default="user", server_default="user")
    institution_id: Mapped[Optional[int]] = mapped_column(sa.Integer, index=True)
