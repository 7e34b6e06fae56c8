"""Command-line interface for running and inspecting the book service."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.bookshelf.entities.service.book import BookRepository
from src.bookshelf.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()

app = typer.Typer(
    name="bookshelf",
    help="Bookshelf CLI - run the API and manage its database",
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    Start the FastAPI server under uvicorn.

    Host and port default to the values in config.yaml.
    """
    import uvicorn

    config = get_config()
    if host is None:
        host = config.app.host
    if port is None:
        port = config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Bookshelf API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.bookshelf.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create the database tables on the configured database."""
    from src.bookshelf.runtime.init_db import init_db as create_tables

    create_tables()
    console.print(
        f"[green]✅ Tables created on[/green] {get_config().database.url}"
    )


@app.command(name="list-books")
def list_books() -> None:
    """Print every stored book."""
    from src.bookshelf.runtime.init_db import init_db as create_tables

    database_service = create_tables()
    with database_service.session_scope() as session:
        books = BookRepository(session).list_all()

    if not books:
        console.print("[yellow]No books found[/yellow]")
        return

    table = Table(title="Books")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Author", style="magenta")
    table.add_column("Description")
    for book in books:
        table.add_row(str(book.id), book.title, book.author, book.description)
    console.print(table)


if __name__ == "__main__":
    app()
