from __future__ import annotations

from fastapi import APIRouter, Depends

from edustack.auth.deps import require_user
from edustack.db.repository import Storage, get_storage
from edustack.schemas import DashboardStats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(require_user)])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(storage: Storage = Depends(get_storage)):
    return DashboardStats.model_validate(await storage.dashboard_stats())
