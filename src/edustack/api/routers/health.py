# src/edustack/api/routers/health.py
from __future__ import annotations

import sqlalchemy as sa
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from edustack.app_logger import get_logger

log = get_logger("health")

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz():
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request):
    checks = {"database": False, "sessions": False}
    try:
        async with request.app.state.db_engine.connect() as conn:
            await conn.execute(sa.text("SELECT 1"))
        checks["database"] = True
    except Exception as e:
        log.warning("Readiness: database unreachable: %s", e)
    checks["sessions"] = await request.app.state.session_store.ping()

    ok = all(checks.values())
    return JSONResponse(
        status_code=200 if ok else 503,
        content={"status": "ok" if ok else "unavailable", "checks": checks},
    )
