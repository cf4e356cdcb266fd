from __future__ import annotations

from typing import Literal

from .base import APIModel, NonEmptyStr

InstitutionType = Literal["university", "college", "school"]


class InstitutionCreate(APIModel):
    name: NonEmptyStr
    address: NonEmptyStr
    phone: NonEmptyStr
    email: NonEmptyStr
    type: InstitutionType = "university"


class InstitutionOut(APIModel):
    id: int
    name: str
    address: str
    phone: str
    email: str
    type: str
