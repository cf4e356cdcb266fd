# tests/test_repository.py
"""Data-access layer exercised directly, without HTTP."""
import pytest

from edustack.errors import DuplicateError

pytestmark = pytest.mark.anyio

STUDENT = {
    "full_name": "Alice Johnson",
    "enrollment_number": "STU-2024-001",
    "email": "alice@nit.edu",
    "department": "Computer Science",
    "semester": 3,
    "institution_id": 1,
}


async def test_create_assigns_id(storage):
    student = await storage.students.create(STUDENT)
    assert student.id >= 1
    assert (await storage.students.get(student.id)).enrollment_number == "STU-2024-001"


async def test_list_is_ordered_by_id(storage):
    for n in range(3):
        await storage.students.create(dict(STUDENT, enrollment_number=f"STU-{n}"))
    ids = [s.id for s in await storage.students.list()]
    assert ids == sorted(ids)
    assert len(ids) == 3


async def test_delete_reports_whether_a_row_went(storage):
    student = await storage.students.create(STUDENT)
    assert await storage.students.delete(student.id) is True
    assert await storage.students.delete(student.id) is False
    assert await storage.students.get(student.id) is None


async def test_store_level_unique_violation_becomes_duplicate_error(storage):
    await storage.students.create(STUDENT)
    with pytest.raises(DuplicateError) as info:
        await storage.students.create(STUDENT)
    assert info.value.field == "enrollmentNumber"

    # session is usable again after the rollback
    assert await storage.students.count() == 1


async def test_username_unique_at_store_level(storage):
    user = {
        "username": "admin",
        "password": "x",
        "email": "a@b.c",
        "full_name": "Admin",
        "role": "admin",
        "institution_id": None,
    }
    await storage.users.create(user)
    with pytest.raises(DuplicateError) as info:
        await storage.users.create(user)
    assert info.value.message == "Username already exists"
    assert info.value.field == "username"


async def test_get_by_username(storage):
    assert await storage.users.get_by_username("ghost") is None


async def test_for_model_unknown(storage):
    with pytest.raises(LookupError):
        storage.for_model(dict)


async def test_list_public_omits_password(storage):
    await storage.users.create({
        "username": "instructor",
        "password": "not-a-real-hash",
        "email": "t@school.edu",
        "full_name": "Instructor One",
        "role": "user",
        "institution_id": None,
    })
    (row,) = await storage.users.list_public()
    assert row["username"] == "instructor"
    assert "password" not in row
