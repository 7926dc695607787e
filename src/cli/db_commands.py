"""Database schema commands."""

import typer
from rich.prompt import Confirm

from src.lms.core.services import DbManageService

from .utils import console, get_dependencies

db_app = typer.Typer(help="🗄️  Manage the library database schema")


@db_app.command("init")
def init() -> None:
    """Create every table that does not exist yet."""
    deps = get_dependencies()
    try:
        DbManageService(deps.database_service).create_all()
    finally:
        deps.database_service.dispose()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("drop")
def drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop every table, including all loan and payment history."""
    if not force and not Confirm.ask("[red]Drop all tables?[/red]"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit()

    deps = get_dependencies()
    try:
        DbManageService(deps.database_service).drop_all()
    finally:
        deps.database_service.dispose()
    console.print("[green]✅ All tables dropped[/green]")
