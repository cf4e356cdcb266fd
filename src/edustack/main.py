# src/edustack/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.responses import JSONResponse

from edustack.api.routers import auth_flow, dashboard, health, users
from edustack.api.routers.resources import resource_routers
from edustack.app_logger import get_logger, setup_logging
from edustack.core.config import Settings
from edustack.db.repository import Storage
from edustack.db.session import create_all, make_engine, make_sessionmaker, mask_url
from edustack.errors import EduStackError
from edustack.sessions import RedisSession, make_session_store

log = get_logger("main")


def generate_unique_id(route: APIRoute) -> str:
    methods = "_".join(sorted((route.methods or []), key=str.lower)).lower()
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "").strip("_")
    tag = (route.tags[0] if route.tags else "default").lower().replace(" ", "_")
    return f"{tag}__{methods}__{path}"


def _field_from_loc(loc) -> Optional[str]:
    # ("body", "fullName") -> "fullName"; ("path", "item_id") -> "item_id"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else []
    return ".".join(parts) or None


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(EduStackError)
    async def edustack_error_handler(request: Request, exc: EduStackError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report the first offending field only, as {message, field}."""
        errors = exc.errors()
        first = errors[0] if errors else {"msg": "Invalid request", "loc": ()}
        body = {"message": first.get("msg", "Invalid request")}
        field = None
        if first.get("type") != "json_invalid":  # loc holds a byte offset there
            field = _field_from_loc(tuple(first.get("loc", ())))
        if field:
            body["field"] = field
        log.debug("Validation failed on %s %s: %s", request.method, request.url.path, body)
        return JSONResponse(status_code=400, content=body)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    *,
    engine: Optional[AsyncEngine] = None,
    session_store: Optional[RedisSession] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Build the application. The engine, sessionmaker and session store are
    created here (or passed in) and owned by `app.state`; handlers reach them
    through the request, never through module globals.
    """
    settings = settings or Settings()
    if configure_logging:
        setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ---------------- STARTUP ----------------
        log.info("Starting %s %s (db=%s)", settings.APP_NAME, settings.APP_VERSION,
                 mask_url(settings.DATABASE_URL))
        if settings.DB_CREATE_ALL:
            await create_all(app.state.db_engine)
        if settings.SEED_ON_STARTUP:
            from edustack.seed import seed_database

            async with app.state.sessionmaker() as session:
                await seed_database(Storage(session))
        yield
        # ---------------- SHUTDOWN ----------------
        await app.state.session_store.close()
        await app.state.db_engine.dispose()
        log.info("Shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        generate_unique_id_function=generate_unique_id,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_engine = engine or make_engine(settings)
    app.state.sessionmaker = make_sessionmaker(app.state.db_engine)
    app.state.session_store = session_store or make_session_store(settings)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_error_handlers(app)

    app.include_router(health.router)
    app.include_router(auth_flow.router)
    app.include_router(dashboard.router)
    app.include_router(users.router)
    for router in resource_routers():
        app.include_router(router)

    return app
