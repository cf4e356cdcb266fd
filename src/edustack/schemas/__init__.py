from .attendance import AttendanceCreate, AttendanceOut
from .auth import LoginRequest, MessageOut, RegisterRequest, UserEnvelope, UserOut
from .dashboard import DashboardStats
from .faculty import FacultyCreate, FacultyOut
from .institution import InstitutionCreate, InstitutionOut
from .school_class import ClassCreate, ClassOut
from .student import StudentCreate, StudentOut
from .timetable import TimetableCreate, TimetableOut

__all__ = [
    "AttendanceCreate", "AttendanceOut",
    "ClassCreate", "ClassOut",
    "DashboardStats",
    "FacultyCreate", "FacultyOut",
    "InstitutionCreate", "InstitutionOut",
    "LoginRequest", "MessageOut", "RegisterRequest", "UserEnvelope", "UserOut",
    "StudentCreate", "StudentOut",
    "TimetableCreate", "TimetableOut",
]
