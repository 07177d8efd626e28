"""Server and configuration CLI commands."""

import typer
import uvicorn
from rich.panel import Panel
from rich.table import Table

from src.bookshelf.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the catalog API server.
    """
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit("[bold green]Starting Bookshelf API[/bold green]", border_style="green")
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.bookshelf.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["src"] if reload else None,
        access_log=False,
    )


def show_config() -> None:
    """
    ⚙️  Print the effective configuration.
    """
    config = get_config()
    table = Table(title=f"Configuration ({config.app.environment})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    rows = {
        "app.host": config.app.host,
        "app.port": config.app.port,
        "app.cors.origins": ", ".join(config.app.cors.origins),
        "logging.level": config.logging.level,
        "logging.format": config.logging.format,
        "logging.file": config.logging.file or "-",
        "database.url": config.database.url,
        "database.create_tables": config.database.create_tables,
        "storage.root": str(config.storage.root_path),
        "storage.public_prefix": config.storage.public_prefix,
        "pagination.default_page_size": config.pagination.default_page_size,
        "pagination.max_page_size": config.pagination.max_page_size,
    }
    for key, value in rows.items():
        table.add_row(key, str(value))

    console.print(table)
