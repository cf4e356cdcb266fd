# tests/__init__.py
# --------------------------------------------------------------------------------------
# Shared helpers for the test package.
#
# BaseEduStackClass gives class-based tests ready-made payload builders so each test
# only spells out the field it is exercising.
# --------------------------------------------------------------------------------------

TEST_PASSWORD = "test-password"


def institution_payload(**overrides) -> dict:
    body = {
        "name": "National Institute of Technology",
        "address": "123 University Road, Tech City",
        "phone": "+1-555-0100",
        "email": "admin@nit.edu",
        "type": "university",
    }
    body.update(overrides)
    return body


def student_payload(**overrides) -> dict:
    body = {
        "fullName": "Alice Johnson",
        "enrollmentNumber": "STU-2024-001",
        "email": "alice@nit.edu",
        "department": "Computer Science",
        "semester": 3,
        "institutionId": 1,
    }
    body.update(overrides)
    return body


def faculty_payload(**overrides) -> dict:
    body = {
        "fullName": "Dr. Sarah Chen",
        "employeeId": "FAC-001",
        "email": "sarah.chen@nit.edu",
        "department": "Computer Science",
        "designation": "Professor",
        "institutionId": 1,
    }
    body.update(overrides)
    return body


def class_payload(**overrides) -> dict:
    body = {
        "name": "CS-301",
        "subject": "Data Structures & Algorithms",
        "department": "Computer Science",
        "semester": 3,
        "institutionId": 1,
    }
    body.update(overrides)
    return body


def attendance_payload(**overrides) -> dict:
    body = {
        "studentId": 1,
        "classId": 1,
        "date": "2026-02-18",
        "status": "present",
        "markedBy": 1,
    }
    body.update(overrides)
    return body


def timetable_payload(**overrides) -> dict:
    body = {
        "classId": 1,
        "facultyId": 1,
        "subject": "Data Structures & Algorithms",
        "dayOfWeek": "Monday",
        "startTime": "09:00",
        "endTime": "10:30",
        "room": "Room 101",
        "institutionId": 1,
    }
    body.update(overrides)
    return body


def register_payload(**overrides) -> dict:
    body = {
        "username": "tester",
        "password": TEST_PASSWORD,
        "email": "tester@example.com",
        "fullName": "Test User",
        "role": "admin",
    }
    body.update(overrides)
    return body


class BaseEduStackClass:
    """Mixin for class-based tests; payload builders as methods."""

    institution = staticmethod(institution_payload)
    student = staticmethod(student_payload)
    faculty = staticmethod(faculty_payload)
    school_class = staticmethod(class_payload)
    attendance = staticmethod(attendance_payload)
    timetable = staticmethod(timetable_payload)
