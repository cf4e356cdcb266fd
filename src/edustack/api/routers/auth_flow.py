# src/edustack/api/routers/auth_flow.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from edustack.app_logger import get_logger
from edustack.auth.deps import get_current_user
from edustack.db.models import User
from edustack.db.repository import Storage, get_storage
from edustack.errors import AuthenticationError, DuplicateError
from edustack.schemas import LoginRequest, MessageOut, RegisterRequest, UserEnvelope, UserOut
from edustack.security import hash_password, verify_password
from edustack.sessions import end_session, start_session

log = get_logger("auth")

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _envelope(user: User) -> UserEnvelope:
    return UserEnvelope(user=UserOut.model_validate(user))


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    request: Request,
    response: Response,
    storage: Storage = Depends(get_storage),
):
    # Pre-check gives the friendly message; the unique constraint still
    # catches a concurrent registration and reports the same error.
    if await storage.users.get_by_username(payload.username):
        log.info("Registration rejected, username taken: %s", payload.username)
        raise DuplicateError("Username already exists", field="username")

    fields = payload.model_dump()
    fields["password"] = hash_password(payload.password)
    user = await storage.users.create(fields)

    await start_session(request, response, user.id)
    log.info("Registered user id=%s username=%s", user.id, user.username)
    return _envelope(user)


@router.post("/login", response_model=UserEnvelope)
async def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    storage: Storage = Depends(get_storage),
):
    user = await storage.users.get_by_username(payload.username)
    if not verify_password(payload.password, user.password if user else None):
        log.info("Login failed for username=%s", payload.username)
        raise AuthenticationError("Invalid credentials")

    await start_session(request, response, user.id)
    return _envelope(user)


@router.get("/me", response_model=UserEnvelope)
async def me(user: User = Depends(get_current_user)):
    return _envelope(user)


@router.post("/logout", response_model=MessageOut)
async def logout(request: Request, response: Response):
    await end_session(request, response)
    return MessageOut(message="Logged out")
