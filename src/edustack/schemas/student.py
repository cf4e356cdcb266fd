from __future__ import annotations

from pydantic import Field
from typing import Annotated

from .base import APIModel, DecodedInt, NonEmptyStr, RecordId


class StudentCreate(APIModel):
    full_name: NonEmptyStr
    enrollment_number: NonEmptyStr
    email: NonEmptyStr
    department: NonEmptyStr
    semester: Annotated[DecodedInt, Field(ge=1)]
    institution_id: RecordId


class StudentOut(APIModel):
    id: int
    full_name: str
    enrollment_number: str
    email: str
    department: str
    semester: int
    institution_id: int
