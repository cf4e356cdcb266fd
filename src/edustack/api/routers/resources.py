# src/edustack/api/routers/resources.py
from __future__ import annotations

from fastapi import APIRouter

from edustack.api.router_factory import build_crud_router
from edustack.db.models import (
    Attendance,
    Faculty,
    Institution,
    SchoolClass,
    Student,
    TimetableEntry,
)
from edustack import schemas

# (model, create schema, read schema, path, delete exposed?)
RESOURCES = [
    (Institution, schemas.InstitutionCreate, schemas.InstitutionOut, "/api/institutions", False),
    (Student, schemas.StudentCreate, schemas.StudentOut, "/api/students", True),
    (Faculty, schemas.FacultyCreate, schemas.FacultyOut, "/api/faculty", True),
    (SchoolClass, schemas.ClassCreate, schemas.ClassOut, "/api/classes", True),
    (Attendance, schemas.AttendanceCreate, schemas.AttendanceOut, "/api/attendance", False),
    (TimetableEntry, schemas.TimetableCreate, schemas.TimetableOut, "/api/timetable", True),
]


def resource_routers() -> list[APIRouter]:
    return [
        build_crud_router(
            model=model,
            create_schema=create_schema,
            read_schema=read_schema,
            path_prefix=path,
            tags=[path.rsplit("/", 1)[-1]],
            allow_delete=allow_delete,
        )
        for model, create_schema, read_schema, path, allow_delete in RESOURCES
    ]
