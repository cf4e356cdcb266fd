from __future__ import annotations

from typing import Optional

from .base import APIModel, NonEmptyStr, Password, RecordId


class RegisterRequest(APIModel):
    username: NonEmptyStr
    password: Password
    email: NonEmptyStr
    full_name: NonEmptyStr
    role: NonEmptyStr = "user"
    institution_id: Optional[RecordId] = None


class LoginRequest(APIModel):
    username: NonEmptyStr
    password: Password


class UserOut(APIModel):
    """A user as sent over the wire; the password hash is never included."""
    id: int
    username: str
    email: str
    full_name: str
    role: str
    institution_id: Optional[int] = None


class UserEnvelope(APIModel):
    user: UserOut


class MessageOut(APIModel):
    message: str
