"""Catalog administration commands."""

import typer
from rich.table import Table

from src.lms.core.models import BookStatus
from src.lms.entities.service.catalog import Book

from .utils import console, get_dependencies, report

catalog_app = typer.Typer(help="📖 Manage books, categories and locations")

_STATUS_STYLE = {
    BookStatus.IDLE: "[green]idle[/green]",
    BookStatus.RESERVED: "[yellow]reserved[/yellow]",
    BookStatus.BORROWED: "[red]borrowed[/red]",
}


@catalog_app.command("add-category")
def add_category(name: str = typer.Argument(..., help="Category name")) -> None:
    """Add a book category."""
    report(get_dependencies().catalog_service.add_category(name))


@catalog_app.command("add-location")
def add_location(name: str = typer.Argument(..., help="Shelf or room name")) -> None:
    """Add a shelf location."""
    report(get_dependencies().catalog_service.add_location(name))


@catalog_app.command("add-book")
def add_book(
    name: str = typer.Argument(..., help="Book title"),
    author: str = typer.Option("", "--author", "-a", help="Author"),
    isbn: str = typer.Option("", "--isbn", help="ISBN"),
    language: str = typer.Option("", "--language", help="Language"),
    location_id: int = typer.Option(0, "--location", "-l", help="Location id (0 for none)"),
    category_id: int = typer.Option(0, "--category", "-c", help="Category id (0 for none)"),
) -> None:
    """Add a book to the catalog."""
    book = Book(
        name=name,
        author=author,
        isbn=isbn,
        language=language,
        location_id=location_id,
        category_id=category_id,
    )
    report(get_dependencies().catalog_service.add_book(book))


@catalog_app.command("delete-book")
def delete_book(book_id: int = typer.Argument(..., help="Book id")) -> None:
    """Remove a book that is neither reserved nor borrowed."""
    report(get_dependencies().catalog_service.delete_book(book_id))


@catalog_app.command("books")
def list_books(
    page: int = typer.Option(1, "--page", "-p", help="1-based page number"),
    category_id: int | None = typer.Option(None, "--category", "-c", help="Filter by category"),
    location_id: int | None = typer.Option(None, "--location", "-l", help="Filter by location"),
) -> None:
    """List one page of books with their current status."""
    catalog = get_dependencies().catalog_service
    if category_id is not None:
        books = catalog.get_books_by_category(page, category_id)
        pages = catalog.get_books_pages_by_category(category_id)
    elif location_id is not None:
        books = catalog.get_books_by_location(page, location_id)
        pages = catalog.get_books_pages_by_location(location_id)
    else:
        books = catalog.get_books_by_page(page)
        pages = catalog.get_books_pages()

    if not books:
        console.print("[yellow]No books found[/yellow]")
        return

    table = Table(title=f"Books (page {max(page, 1)} of {pages})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Author", style="blue")
    table.add_column("ISBN")
    table.add_column("Category", style="magenta")
    table.add_column("Location", style="magenta")
    table.add_column("Status")

    for book in books:
        table.add_row(
            str(book.id),
            book.name,
            book.author,
            book.isbn,
            book.category,
            book.location,
            _STATUS_STYLE[book.status],
        )

    console.print(table)
