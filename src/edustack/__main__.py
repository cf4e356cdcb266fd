# edustack/__main__.py
# ================================================================================================
# Command line entry point:  `python -m edustack ...`  or the `edustack` console script.
#
#   serve        run the API under uvicorn
#   init-db      create all tables (dev; production uses alembic)
#   seed         insert demo data into an empty database
#   create-user  add a login account with a hashed password
# ================================================================================================
from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from edustack.app_logger import setup_logging
from edustack.core.config import get_settings
from edustack.db.repository import Storage
from edustack.db.session import create_all, make_engine, make_sessionmaker
from edustack.errors import DuplicateError
from edustack.security import hash_password

app = typer.Typer(help="EduStack administration CLI")
console = Console()


async def _with_storage(fn):
    settings = get_settings()
    engine = make_engine(settings)
    try:
        async with make_sessionmaker(engine)() as session:
            return await fn(Storage(session))
    finally:
        await engine.dispose()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
):
    """Run the API server."""
    import uvicorn

    uvicorn.run("edustack.main:create_app", factory=True, host=host, port=port, reload=reload)


@app.command("init-db")
def init_db():
    """Create every table that does not exist yet."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, json=False)

    async def _run():
        engine = make_engine(settings)
        try:
            await create_all(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print("[green]Tables ready[/] ✅")


@app.command()
def seed():
    """Insert demo institutions, people, classes and schedules."""
    from edustack.seed import seed_database

    setup_logging(get_settings().LOG_LEVEL, json=False)

    async def _run(storage: Storage):
        seeded = await seed_database(storage)
        table = Table(show_lines=False)
        table.add_column("entity")
        table.add_column("count", justify="right")
        stats = await storage.dashboard_stats()
        for key in ("total_institutions", "total_students", "total_faculty", "total_classes"):
            table.add_row(key.removeprefix("total_"), str(stats[key]))
        return seeded, table

    seeded, table = asyncio.run(_with_storage(_run))
    console.print("[green]Seeded[/] ✅" if seeded else "[yellow]Database not empty; nothing seeded[/]")
    console.print(table)


@app.command("create-user")
def create_user(
    username: str = typer.Argument(..., help="Login name"),
    email: str = typer.Option(..., help="Email address"),
    full_name: str = typer.Option(..., "--full-name", help="Display name"),
    role: str = typer.Option("user", help="Role label"),
    institution_id: Optional[int] = typer.Option(None, help="Owning institution id"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
):
    """Create a login account."""

    async def _run(storage: Storage):
        return await storage.users.create({
            "username": username,
            "password": hash_password(password),
            "email": email,
            "full_name": full_name,
            "role": role,
            "institution_id": institution_id,
        })

    try:
        user = asyncio.run(_with_storage(_run))
    except DuplicateError as e:
        console.print(f"[red]{e.message}[/]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created user[/] id=[cyan]{user.id}[/] username=[cyan]{user.username}[/]")


if __name__ == "__main__":
    app()
