from __future__ import annotations

import re
from datetime import date as _date
from typing import Literal, Optional

from pydantic import field_validator

from .base import APIModel, NonEmptyStr, RecordId

AttendanceStatus = Literal["present", "absent", "late"]

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class AttendanceCreate(APIModel):
    student_id: RecordId
    class_id: RecordId
    date: NonEmptyStr
    status: AttendanceStatus = "present"
    marked_by: Optional[RecordId] = None

    @field_validator("date")
    @classmethod
    def _iso_calendar_date(cls, v: str) -> str:
        if not _ISO_DATE.fullmatch(v):
            raise ValueError("date must be formatted YYYY-MM-DD")
        _date.fromisoformat(v)  # rejects 2026-02-30
        return v


class AttendanceOut(APIModel):
    id: int
    student_id: int
    class_id: int
    date: str
    status: str
    marked_by: Optional[int] = None
