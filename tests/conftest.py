# tests/conftest.py
"""
In-process test harness.

- The app is built with `create_app()` against a throwaway sqlite file
  (aiosqlite) and an in-memory fakeredis session store, both passed in
  explicitly exactly as production passes Postgres and Redis.
- Requests go through httpx.AsyncClient + ASGITransport, so cookies set by
  the app round-trip like they would in a browser.
"""
from __future__ import annotations

import logging
import os
import sys

import pytest
from fakeredis import aioredis as fake_aioredis
from httpx import ASGITransport, AsyncClient

from edustack.core.config import Settings
from edustack.db.repository import Storage
from edustack.db.session import create_all, make_engine, make_sessionmaker
from edustack.main import create_app
from edustack.sessions import RedisSession

from tests import register_payload


# =========================
# Logging -> stdout
# =========================
@pytest.fixture(scope="session", autouse=True)
def _tests_log_to_stdout():
    root = logging.getLogger()
    if not any(getattr(h, "stream", None) is sys.stdout for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(os.getenv("TEST_LOG_LEVEL", "INFO").upper())


# Make anyio run on asyncio (so our async fixtures work everywhere)
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'edustack-test.db'}",
        "LOG_JSON": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
async def engine(settings):
    eng = make_engine(settings)
    await create_all(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
async def storage(engine):
    async with make_sessionmaker(engine)() as session:
        yield Storage(session)


@pytest.fixture
def session_store(settings) -> RedisSession:
    return RedisSession(
        prefix=settings.SESSION_PREFIX,
        ttl=settings.SESSION_TTL_SECONDS,
        client=fake_aioredis.FakeRedis(decode_responses=True),
    )


@pytest.fixture
def app(settings, engine, session_store):
    return create_app(settings, engine=engine, session_store=session_store, configure_logging=False)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
async def auth_client(client):
    """A client holding a live session for a freshly registered user."""
    r = await client.post("/api/auth/register", json=register_payload())
    assert r.status_code == 201, r.text
    return client
