# tests/test_users.py
import pytest

from tests import register_payload

pytestmark = pytest.mark.anyio


async def test_list_users_omits_passwords(auth_client):
    await auth_client.post(
        "/api/auth/register",
        json=register_payload(username="second", email="second@example.com", institutionId="1"),
    )
    r = await auth_client.get("/api/users")
    assert r.status_code == 200
    users = r.json()
    assert [u["username"] for u in users] == ["tester", "second"]
    for u in users:
        assert "password" not in u
        assert set(u) == {"id", "username", "email", "fullName", "role", "institutionId"}
    assert users[1]["institutionId"] == 1
