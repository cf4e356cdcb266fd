from __future__ import annotations

from fastapi import APIRouter, Depends

from edustack.auth.deps import require_user
from edustack.db.repository import Storage, get_storage
from edustack.schemas import UserOut

router = APIRouter(prefix="/api/users", tags=["users"], dependencies=[Depends(require_user)])


@router.get("", response_model=list[UserOut])
async def list_users(storage: Storage = Depends(get_storage)):
    return [UserOut.model_validate(u) for u in await storage.users.list_public()]
