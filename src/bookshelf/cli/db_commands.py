"""Database CLI commands."""

import typer
from rich.panel import Panel

from .utils import console

db_app = typer.Typer(help="🗄️  Catalog database commands")


@db_app.command(name="init")
def init(
    reset: bool = typer.Option(
        False, "--reset", help="Drop existing tables before creating them"
    ),
) -> None:
    """Create the catalog tables in the configured database."""
    from src.bookshelf.runtime.context import get_config
    from src.bookshelf.runtime.init_db import init_db

    config = get_config()
    console.print(
        Panel.fit(
            f"[bold blue]Initializing database[/bold blue]\n{config.database.url}",
            border_style="blue",
        )
    )
    if reset:
        console.print("[yellow]Dropping existing tables first[/yellow]")

    init_db(reset=reset)
    console.print("[green]✅ Database tables are ready[/green]")


@db_app.command(name="check")
def check() -> None:
    """Verify that the configured database accepts connections."""
    from src.bookshelf.core.services import DbSessionService

    service = DbSessionService()
    try:
        if not service.health_check():
            console.print("[red]❌ Database is not reachable[/red]")
            raise typer.Exit(1)
        console.print("[green]✅ Database is reachable[/green]")
    finally:
        service.dispose()
