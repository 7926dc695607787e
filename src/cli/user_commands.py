"""Library member commands."""

import typer
from rich.table import Table

from .utils import console, get_dependencies, report

users_app = typer.Typer(help="👤 Manage library members")


@users_app.command("add")
def add_user(
    name: str = typer.Argument(..., help="Member name"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Initial password"
    ),
) -> None:
    """Register a new member."""
    report(get_dependencies().account_service.register(name, password))


@users_app.command("fines")
def list_fines(
    user_id: int = typer.Argument(..., help="Member id"),
    unpaid_only: bool = typer.Option(False, "--unpaid", help="Only show unpaid fines"),
) -> None:
    """Show the fines issued to a member."""
    fines = get_dependencies().reconciliation_service.list_fines(user_id, unpaid_only=unpaid_only)
    if not fines:
        console.print(f"[yellow]No fines for user {user_id}[/yellow]")
        return

    table = Table(title=f"Fines for user {user_id}")
    table.add_column("Payment", style="cyan")
    table.add_column("Amount", style="green")
    table.add_column("Paid")
    for fine in fines:
        table.add_row(str(fine.id), str(fine.amount), "✅" if fine.done else "❌")
    console.print(table)
