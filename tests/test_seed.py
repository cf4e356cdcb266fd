# tests/test_seed.py
import pytest

from edustack.seed import ADMIN_PASSWORD, ADMIN_USERNAME, seed_database

pytestmark = pytest.mark.anyio


async def test_seed_only_into_empty_store(storage):
    assert await seed_database(storage) is True
    assert await seed_database(storage) is False

    stats = await storage.dashboard_stats()
    assert stats["total_institutions"] == 2
    assert stats["total_students"] == 5
    assert stats["total_faculty"] == 4
    assert stats["total_classes"] == 3
    assert len(stats["recent_attendance"]) == 4
    assert len(await storage.timetable.list()) == 4


async def test_seeded_admin_can_log_in(client, storage):
    await seed_database(storage)
    r = await client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    assert r.json()["user"]["role"] == "admin"


async def test_seed_on_startup(tmp_path):
    from fakeredis import aioredis as fake_aioredis
    from httpx import ASGITransport, AsyncClient

    from edustack.main import create_app
    from edustack.sessions import RedisSession
    from tests.conftest import make_settings

    settings = make_settings(tmp_path, DB_CREATE_ALL=True, SEED_ON_STARTUP=True)
    store = RedisSession(client=fake_aioredis.FakeRedis(decode_responses=True))
    app = create_app(settings, session_store=store, configure_logging=False)

    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
            r = await c.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
            assert r.status_code == 200
            stats = (await c.get("/api/dashboard/stats")).json()
            assert stats["totalInstitutions"] == 2
