"""Shared schema config and the explicit field decoders.

Request bodies arrive as camelCase JSON. Numeric foreign keys are sometimes
sent as strings by the dashboard, so integer fields go through
:func:`decode_int`, which accepts ``3`` or ``"3"`` and rejects everything
else (``"3.5"``, ``"abc"``, ``true``, ``3.0``) instead of guessing.
"""
from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

_INT_RE = re.compile(r"[+-]?[0-9]+")


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


def decode_int(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INT_RE.fullmatch(text):
            return int(text)
        raise PydanticCustomError(
            "int_parsing",
            "Input should be a whole number, got '{value}'",
            {"value": value},
        )
    raise PydanticCustomError("int_type", "Input should be a whole number")


# Largest value a store INTEGER column holds.
MAX_INT = 2**31 - 1

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Password = Annotated[str, StringConstraints(min_length=1)]  # compared byte for byte, never stripped
DecodedInt = Annotated[int, BeforeValidator(decode_int), Field(le=MAX_INT)]
RecordId = Annotated[int, BeforeValidator(decode_int), Field(ge=1, le=MAX_INT)]

__all__ = ["APIModel", "NonEmptyStr", "Password", "DecodedInt", "RecordId", "MAX_INT", "decode_int"]
