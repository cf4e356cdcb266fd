from __future__ import annotations

from pydantic import Field
from typing import Annotated

from .base import APIModel, DecodedInt, NonEmptyStr, RecordId


class ClassCreate(APIModel):
    name: NonEmptyStr
    subject: NonEmptyStr
    department: NonEmptyStr
    semester: Annotated[DecodedInt, Field(ge=1)]
    institution_id: RecordId


class ClassOut(APIModel):
    id: int
    name: str
    subject: str
    department: str
    semester: int
    institution_id: int
