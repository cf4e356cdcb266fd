from __future__ import annotations

import re
from typing import Literal

from pydantic import ValidationInfo, field_validator

from .base import APIModel, NonEmptyStr, RecordId

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

_HHMM = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


class TimetableCreate(APIModel):
    class_id: RecordId
    faculty_id: RecordId
    subject: NonEmptyStr
    day_of_week: Weekday
    start_time: NonEmptyStr
    end_time: NonEmptyStr
    room: NonEmptyStr
    institution_id: RecordId

    @field_validator("start_time", "end_time")
    @classmethod
    def _hh_mm(cls, v: str) -> str:
        if not _HHMM.fullmatch(v):
            raise ValueError("time must be formatted HH:MM (24h)")
        return v

    @field_validator("end_time")
    @classmethod
    def _after_start(cls, v: str, info: ValidationInfo) -> str:
        start = info.data.get("start_time")
        # zero-padded HH:MM compares correctly as text
        if start is not None and v <= start:
            raise ValueError("endTime must be after startTime")
        return v


class TimetableOut(APIModel):
    id: int
    class_id: int
    faculty_id: int
    subject: str
    day_of_week: str
    start_time: str
    end_time: str
    room: str
    institution_id: int
