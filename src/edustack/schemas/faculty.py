from __future__ import annotations

from .base import APIModel, NonEmptyStr, RecordId


class FacultyCreate(APIModel):
    full_name: NonEmptyStr
    employee_id: NonEmptyStr
    email: NonEmptyStr
    department: NonEmptyStr
    designation: NonEmptyStr
    institution_id: RecordId


class FacultyOut(APIModel):
    id: int
    full_name: str
    employee_id: str
    email: str
    department: str
    designation: str
    institution_id: int
