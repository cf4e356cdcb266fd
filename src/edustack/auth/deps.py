# src/edustack/auth/deps.py
from __future__ import annotations

from fastapi import Depends, Request, Response

from edustack.app_logger import get_logger
from edustack.db.models import User
from edustack.db.repository import Storage, get_storage
from edustack.errors import AuthenticationError
from edustack.sessions import resolve_user_id

log = get_logger("auth.deps")


async def current_user_id(request: Request, response: Response) -> int:
    user_id = await resolve_user_id(request, response)
    if user_id is None:
        raise AuthenticationError("Not authenticated")
    return user_id


async def get_current_user(
    user_id: int = Depends(current_user_id),
    storage: Storage = Depends(get_storage),
) -> User:
    user = await storage.users.get(user_id)
    if user is None:
        # session outlived its user row
        log.info("Session refers to missing user id=%s", user_id)
        raise AuthenticationError("User not found")
    return user


# Route-level gate for every data router.
require_user = get_current_user
