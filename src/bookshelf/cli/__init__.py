"""Main CLI application module."""

import typer

from .db_commands import db_app
from .server_commands import serve, show_config

# Create the main CLI application
app = typer.Typer(
    help="📚 Bookshelf CLI - catalog server and database tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="serve")(serve)
app.command(name="show-config")(show_config)
app.add_typer(db_app, name="db")


@app.command(name="init-db")
def init_db_command(
    reset: bool = typer.Option(
        False, "--reset", help="Drop existing tables before creating them"
    ),
) -> None:
    """🗄️  Create the catalog tables (shortcut for [bold]db init[/bold])."""
    from .db_commands import init

    init(reset=reset)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
