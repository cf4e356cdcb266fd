# tests/test_gating.py
"""Every data route answers 401 until the caller holds a session."""
import pytest

pytestmark = pytest.mark.anyio

PROTECTED = [
    ("GET", "/api/institutions"),
    ("POST", "/api/institutions"),
    ("GET", "/api/students"),
    ("POST", "/api/students"),
    ("DELETE", "/api/students/1"),
    ("GET", "/api/faculty"),
    ("POST", "/api/faculty"),
    ("DELETE", "/api/faculty/1"),
    ("GET", "/api/classes"),
    ("POST", "/api/classes"),
    ("DELETE", "/api/classes/1"),
    ("GET", "/api/attendance"),
    ("POST", "/api/attendance"),
    ("GET", "/api/timetable"),
    ("POST", "/api/timetable"),
    ("DELETE", "/api/timetable/1"),
    ("GET", "/api/dashboard/stats"),
    ("GET", "/api/users"),
    ("GET", "/api/auth/me"),
]


@pytest.mark.parametrize("method,path", PROTECTED)
async def test_requires_session(client, method, path):
    kwargs = {"json": {}} if method == "POST" else {}
    r = await client.request(method, path, **kwargs)
    assert r.status_code == 401
    assert r.json() == {"message": "Not authenticated"}


async def test_open_after_login(auth_client):
    r = await auth_client.get("/api/institutions")
    assert r.status_code == 200
    assert r.json() == []
