# src/edustack/sessions.py
from __future__ import annotations

import json
import secrets
from datetime import datetime, timezone
from typing import Any, Optional

import redis.asyncio as redis
from fastapi import Request
from starlette.responses import Response

from edustack.app_logger import get_logger
from edustack.core.config import Settings

log = get_logger("sessions")


class RedisSession:
    """
    Server-side session records, one JSON blob per opaque token at
    `${prefix}${token}`, each with its own expiry.

    The Redis client is passed in (or built from a URL) by whoever owns the
    process; nothing here is module-global.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        prefix: str = "sess:",
        ttl: int = 86400,
        client: Optional[redis.Redis] = None,
    ):
        self._r = client if client is not None else redis.from_url(url, decode_responses=True)
        self._p = prefix
        self.ttl = ttl
        log.info("RedisSession initialized: prefix=%s ttl=%ss", prefix, ttl)

    def _k(self, token: str) -> str:
        return f"{self._p}{token}"

    async def ping(self) -> bool:
        try:
            return bool(await self._r.ping())
        except Exception as e:
            log.warning("Redis ping failed: %s", e)
            return False

    async def create(self, data: dict[str, Any]) -> str:
        token = secrets.token_urlsafe(32)
        record = dict(data, created_at=datetime.now(timezone.utc).isoformat())
        await self._r.set(self._k(token), json.dumps(record), ex=self.ttl)
        log.info("Created sid=%s… ttl=%ss", token[:8], self.ttl)
        return token

    async def get(self, token: str) -> Optional[dict[str, Any]]:
        raw = await self._r.get(self._k(token))
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            log.warning("Discarding unreadable session sid=%s…", token[:8])
            return None
        return data if isinstance(data, dict) else None

    async def touch(self, token: str) -> None:
        await self._r.expire(self._k(token), self.ttl)

    async def remaining_ttl(self, token: str) -> int:
        return await self._r.ttl(self._k(token))  # -2 missing, -1 no expire

    async def destroy(self, token: str) -> None:
        await self._r.delete(self._k(token))
        log.info("Destroyed sid=%s…", token[:8])

    async def close(self) -> None:
        await self._r.aclose()


def make_session_store(settings: Settings) -> RedisSession:
    return RedisSession(
        url=settings.REDIS_URL,
        prefix=settings.SESSION_PREFIX,
        ttl=settings.SESSION_TTL_SECONDS,
    )


# ---- FastAPI integration helpers ----
def get_session_store(request: Request) -> RedisSession:
    return request.app.state.session_store


def read_sid(request: Request) -> Optional[str]:
    settings: Settings = request.app.state.settings
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


def set_sid_cookie(request: Request, response: Response, token: str) -> None:
    settings: Settings = request.app.state.settings
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        samesite=settings.COOKIE_SAMESITE,
        secure=settings.COOKIE_SECURE,
    )


def clear_sid_cookie(request: Request, response: Response) -> None:
    settings: Settings = request.app.state.settings
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite=settings.COOKIE_SAMESITE,
        secure=settings.COOKIE_SECURE,
    )


async def start_session(request: Request, response: Response, user_id: int) -> str:
    """Authenticated(user_id): mint a fresh token, dropping any prior one."""
    store = get_session_store(request)
    old = read_sid(request)
    if old:
        await store.destroy(old)
    token = await store.create({"user_id": user_id})
    set_sid_cookie(request, response, token)
    return token


async def end_session(request: Request, response: Response) -> None:
    """Back to Unauthenticated. Safe to call without a session."""
    sid = read_sid(request)
    if sid:
        await get_session_store(request).destroy(sid)
    clear_sid_cookie(request, response)


async def resolve_user_id(request: Request, response: Response) -> Optional[int]:
    """
    Look up the session named by the cookie. Missing or expired records mean
    Unauthenticated (None). A live record has its expiry slid forward, and
    the cookie is re-issued so the browser side slides too.
    """
    sid = read_sid(request)
    if not sid:
        return None
    store = get_session_store(request)
    data = await store.get(sid)
    if not data or data.get("user_id") is None:
        return None
    await store.touch(sid)
    set_sid_cookie(request, response, sid)
    return int(data["user_id"])


__all__ = [
    "RedisSession",
    "make_session_store",
    "get_session_store",
    "read_sid",
    "start_session",
    "end_session",
    "resolve_user_id",
]
