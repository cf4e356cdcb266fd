# tests/test_schemas.py
import pytest
from pydantic import ValidationError

from edustack.schemas import AttendanceCreate, RegisterRequest, StudentCreate, TimetableCreate, UserOut
from edustack.schemas.base import decode_int


@pytest.mark.parametrize("value,expected", [(7, 7), ("7", 7), (" 7 ", 7), ("-2", -2), ("+4", 4)])
def test_decode_int_accepts(value, expected):
    assert decode_int(value) == expected


@pytest.mark.parametrize("value", ["7.0", "7a", "", "seven", True, 7.0, {}])
def test_decode_int_fails_closed(value):
    with pytest.raises(Exception):
        decode_int(value)


def _first_loc(exc: ValidationError) -> tuple:
    return exc.errors()[0]["loc"]


def test_camel_and_snake_keys_accepted():
    camel = StudentCreate.model_validate({
        "fullName": "A", "enrollmentNumber": "E1", "email": "a@x", "department": "CS",
        "semester": "2", "institutionId": 1,
    })
    snake = StudentCreate.model_validate({
        "full_name": "A", "enrollment_number": "E1", "email": "a@x", "department": "CS",
        "semester": 2, "institution_id": "1",
    })
    assert camel == snake
    assert camel.semester == 2


def test_error_location_uses_wire_name():
    with pytest.raises(ValidationError) as info:
        StudentCreate.model_validate({"enrollmentNumber": "E1"})
    assert _first_loc(info.value) == ("fullName",)


def test_register_strips_and_defaults():
    req = RegisterRequest.model_validate({
        "username": "  admin ", "password": "pw", "email": "a@x", "fullName": "Admin",
    })
    assert req.username == "admin"
    assert req.role == "user"
    assert req.institution_id is None


def test_attendance_rejects_bad_status():
    with pytest.raises(ValidationError) as info:
        AttendanceCreate.model_validate({"studentId": 1, "classId": 1, "date": "2026-01-01", "status": "gone"})
    assert _first_loc(info.value) == ("status",)


def test_timetable_end_time_check_skipped_when_start_invalid():
    with pytest.raises(ValidationError) as info:
        TimetableCreate.model_validate({
            "classId": 1, "facultyId": 1, "subject": "S", "dayOfWeek": "Friday",
            "startTime": "late", "endTime": "10:00", "room": "R", "institutionId": 1,
        })
    locs = [e["loc"] for e in info.value.errors()]
    assert locs == [("startTime",)]


def test_user_out_serializes_camel_case_without_password():
    out = UserOut(id=1, username="u", email="e", full_name="F", role="user", institution_id=None)
    dumped = out.model_dump(by_alias=True)
    assert dumped == {
        "id": 1, "username": "u", "email": "e", "fullName": "F", "role": "user", "institutionId": None,
    }


@pytest.mark.parametrize("value", ["٣", "１２", "1٣"])
def test_decode_int_rejects_non_ascii_digits(value):
    with pytest.raises(Exception):
        decode_int(value)


def test_attendance_date_rejects_non_ascii_digits():
    with pytest.raises(ValidationError) as info:
        AttendanceCreate.model_validate({"studentId": 1, "classId": 1, "date": "٢٠٢٦-02-18"})
    assert _first_loc(info.value) == ("date",)


def test_register_keeps_password_whitespace():
    req = RegisterRequest.model_validate({
        "username": "ws", "password": "  secret  ", "email": "a@x", "fullName": "W S",
    })
    assert req.password == "  secret  "


def test_record_id_upper_bound():
    base = {"fullName": "A", "enrollmentNumber": "E1", "email": "a@x", "department": "CS", "semester": 1}
    assert StudentCreate.model_validate(dict(base, institutionId=2**31 - 1)).institution_id == 2**31 - 1
    with pytest.raises(ValidationError) as info:
        StudentCreate.model_validate(dict(base, institutionId=2**31))
    assert _first_loc(info.value) == ("institutionId",)
