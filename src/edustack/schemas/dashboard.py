from __future__ import annotations

from .attendance import AttendanceOut
from .base import APIModel


class DashboardStats(APIModel):
    total_students: int
    total_faculty: int
    total_classes: int
    total_institutions: int
    recent_attendance: list[AttendanceOut]
