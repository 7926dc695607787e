"""Shared helpers for CLI commands."""

import typer
from rich.console import Console

from src.lms.api.http.app_data import ApplicationDependencies
from src.lms.core.models import StatusResult
from src.lms.runtime.context import get_config

console = Console()


def get_dependencies() -> ApplicationDependencies:
    """Wire the services against the configured database."""
    return ApplicationDependencies.build(get_config())


def report(result: StatusResult) -> None:
    """Print a service result and exit non-zero when it failed."""
    if result.ok:
        console.print(f"[green]✅ {result.message}[/green]")
        return
    console.print(f"[red]❌ {result.message}[/red]")
    raise typer.Exit(code=1)
