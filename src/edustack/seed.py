# src/edustack/seed.py
"""Demo data for a fresh database: two institutions and a small roster."""
from __future__ import annotations

from edustack.app_logger import get_logger
from edustack.db.repository import Storage
from edustack.security import hash_password

log = get_logger("seed")

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

INSTITUTIONS = [
    {
        "name": "National Institute of Technology",
        "address": "123 University Road, Tech City",
        "phone": "+1-555-0100",
        "email": "admin@nit.edu",
        "type": "university",
    },
    {
        "name": "City College of Engineering",
        "address": "456 College Ave, Metro City",
        "phone": "+1-555-0200",
        "email": "info@cce.edu",
        "type": "college",
    },
]

# (full_name, enrollment_number, email, department, semester, institution index)
STUDENTS = [
    ("Alice Johnson", "STU-2024-001", "alice@nit.edu", "Computer Science", 3, 0),
    ("Bob Williams", "STU-2024-002", "bob@nit.edu", "Electrical Engineering", 5, 0),
    ("Carol Davis", "STU-2024-003", "carol@cce.edu", "Mechanical Engineering", 2, 1),
    ("David Martinez", "STU-2024-004", "david@nit.edu", "Computer Science", 7, 0),
    ("Emma Brown", "STU-2024-005", "emma@cce.edu", "Civil Engineering", 4, 1),
]

# (full_name, employee_id, email, department, designation, institution index)
FACULTY = [
    ("Dr. Sarah Chen", "FAC-001", "sarah.chen@nit.edu", "Computer Science", "Professor", 0),
    ("Dr. James Miller", "FAC-002", "james.miller@nit.edu", "Electrical Engineering", "Associate Professor", 0),
    ("Dr. Maria Garcia", "FAC-003", "maria.garcia@cce.edu", "Mechanical Engineering", "Assistant Professor", 1),
    ("Dr. Robert Lee", "FAC-004", "robert.lee@cce.edu", "Civil Engineering", "Professor", 1),
]

# (name, subject, department, semester, institution index)
CLASSES = [
    ("CS-301", "Data Structures & Algorithms", "Computer Science", 3, 0),
    ("EE-501", "Power Systems", "Electrical Engineering", 5, 0),
    ("ME-201", "Thermodynamics", "Mechanical Engineering", 2, 1),
]

# (student index, class index, date, status, faculty index)
ATTENDANCE = [
    (0, 0, "2026-02-18", "present", 0),
    (0, 0, "2026-02-19", "present", 0),
    (1, 1, "2026-02-18", "absent", 1),
    (2, 2, "2026-02-19", "present", 2),
]

# (class index, faculty index, day, start, end, room, institution index)
TIMETABLE = [
    (0, 0, "Monday", "09:00", "10:30", "Room 101", 0),
    (0, 0, "Wednesday", "09:00", "10:30", "Room 101", 0),
    (1, 1, "Tuesday", "11:00", "12:30", "Room 205", 0),
    (2, 2, "Thursday", "14:00", "15:30", "Lab 3", 1),
]


async def seed_database(storage: Storage) -> bool:
    """Insert the demo data unless an institution already exists."""
    if await storage.institutions.count() > 0:
        log.info("Seed skipped: institutions already present")
        return False

    insts = [await storage.institutions.create(row) for row in INSTITUTIONS]

    await storage.users.create(
        {
            "username": ADMIN_USERNAME,
            "password": hash_password(ADMIN_PASSWORD),
            "email": "admin@erp.com",
            "full_name": "System Administrator",
            "role": "admin",
            "institution_id": insts[0].id,
        }
    )

    students = []
    for full_name, number, email, dept, semester, inst in STUDENTS:
        students.append(await storage.students.create({
            "full_name": full_name, "enrollment_number": number, "email": email,
            "department": dept, "semester": semester, "institution_id": insts[inst].id,
        }))

    faculty = []
    for full_name, employee_id, email, dept, designation, inst in FACULTY:
        faculty.append(await storage.faculty.create({
            "full_name": full_name, "employee_id": employee_id, "email": email,
            "department": dept, "designation": designation, "institution_id": insts[inst].id,
        }))

    classes = []
    for name, subject, dept, semester, inst in CLASSES:
        classes.append(await storage.classes.create({
            "name": name, "subject": subject, "department": dept,
            "semester": semester, "institution_id": insts[inst].id,
        }))

    for student, cls, day, status, marker in ATTENDANCE:
        await storage.attendance.create({
            "student_id": students[student].id, "class_id": classes[cls].id,
            "date": day, "status": status, "marked_by": faculty[marker].id,
        })

    for cls, fac, day, start, end, room, inst in TIMETABLE:
        await storage.timetable.create({
            "class_id": classes[cls].id, "faculty_id": faculty[fac].id,
            "subject": classes[cls].subject, "day_of_week": day,
            "start_time": start, "end_time": end, "room": room,
            "institution_id": insts[inst].id,
        })

    log.info(
        "Seeded %d institutions, %d students, %d faculty, %d classes",
        len(insts), len(students), len(faculty), len(classes),
    )
    return True
