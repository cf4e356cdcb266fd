# src/edustack/db/models/__init__.py
from .attendance import ATTENDANCE_STATUSES, Attendance
from .classes import SchoolClass
from .faculty import Faculty
from .institutions import INSTITUTION_TYPES, Institution
from .students import Student
from .timetable import WEEKDAYS, TimetableEntry
from .users import User

__all__ = [
    "ATTENDANCE_STATUSES",
    "INSTITUTION_TYPES",
    "WEEKDAYS",
    "Attendance",
    "Faculty",
    "Institution",
    "SchoolClass",
    "Student",
    "TimetableEntry",
    "User",
]
