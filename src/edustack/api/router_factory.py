import textwrap
from typing import Annotated, Any, Callable, Iterable, Optional, Type

from fastapi import APIRouter, Depends, Path, Request, status
from pydantic import BaseModel

from edustack.app_logger import get_logger
from edustack.auth.deps import require_user
from edustack.db.repository import Storage, get_storage
from edustack.errors import NotFoundError
from edustack.schemas.base import MAX_INT

log = get_logger("api.router_factory")


def _get_model_note(model: type) -> str:
    note = getattr(model, "NOTE", "") or ""
    return " ".join(note.split())


def _note_summary(note: str, table_name: str) -> str:
    table_label = table_name.replace("_", " ").title()
    if not note:
        return table_label

    desc_part = note
    idx = note.lower().find("description=")
    if idx != -1:
        desc_part = note[idx + len("description="):]
    desc_part = desc_part.split(".", 1)[0].strip()
    return desc_part or table_label


def _with_model_note(note: str, extra: str) -> str:
    if note:
        return textwrap.dedent(f"""{note}\n\n{extra}""").strip()
    return extra


def build_crud_router(
    *,
    model: type,
    create_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    path_prefix: str,
    tags: Optional[Iterable[str]] = None,
    allow_delete: bool = True,
    auth_dependency: Optional[Callable[..., Any]] = require_user,
) -> APIRouter:
    """
    List / create / (optionally) delete routes for one entity kind.

    Each handler parses its body through `create_schema` (FastAPI turns a
    failure into a RequestValidationError, rendered as 400 by the app) and
    then makes exactly one call on the entity's repository.
    """
    router = APIRouter(
        prefix=path_prefix,
        tags=list(tags or []),
        dependencies=[Depends(auth_dependency)] if auth_dependency else None,
    )

    table_name = getattr(model, "__tablename__", model.__name__.lower())
    model_note = _get_model_note(model)
    summary = _note_summary(model_note, table_name)

    # LIST
    async def list_items(storage: Storage = Depends(get_storage)):
        items = await storage.for_model(model).list()
        return [read_schema.model_validate(it) for it in items]

    router.add_api_route(
        "",
        list_items,
        methods=["GET"],
        response_model=list[read_schema],
        summary=f"List {table_name}",
        description=_with_model_note(summary, f"Retrieve every `{table_name}` record."),
    )

    # CREATE
    async def create_item(payload: create_schema, storage: Storage = Depends(get_storage)):  # type: ignore[valid-type]
        obj = await storage.for_model(model).create(payload.model_dump())
        return read_schema.model_validate(obj)

    router.add_api_route(
        "",
        create_item,
        methods=["POST"],
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {table_name}",
        description=_with_model_note(
            summary,
            f"Create a new `{table_name}` record. "
            "On success, returns the stored record including its server-assigned id.",
        ),
    )

    if not allow_delete:
        return router

    # DELETE
    async def delete_item(
        item_id: Annotated[int, Path(ge=1, le=MAX_INT)],
        request: Request,
        storage: Storage = Depends(get_storage),
    ) -> None:
        removed = await storage.for_model(model).delete(item_id)
        if not removed and request.app.state.settings.DELETE_MISSING_IS_ERROR:
            raise NotFoundError(f"{table_name} record {item_id} not found")

    router.add_api_route(
        "/{item_id}",
        delete_item,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {table_name}",
        description=_with_model_note(
            summary,
            f"Delete a `{table_name}` record by id. Returns HTTP 204; deleting an id "
            "that does not exist is also 204 unless DELETE_MISSING_IS_ERROR is set.",
        ),
    )

    return router
