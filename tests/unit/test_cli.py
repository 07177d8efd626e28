"""Tests for the bookshelf command line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from src.bookshelf.cli import app

runner = CliRunner()


class TestCli:
    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("serve", "show-config", "init-db", "db"):
            assert command in result.output

    def test_show_config(self):
        result = runner.invoke(app, ["show-config"])

        assert result.exit_code == 0
        assert "storage.public_prefix" in result.output
        assert "/images/books" in result.output

    def test_init_db(self):
        with patch("src.bookshelf.runtime.init_db.init_db") as init_db:
            result = runner.invoke(app, ["init-db", "--reset"])

        assert result.exit_code == 0, result.output
        init_db.assert_called_once_with(reset=True)
        assert "Database tables are ready" in result.output

    def test_db_check(self):
        result = runner.invoke(app, ["db", "check"])

        assert result.exit_code == 0, result.output
        assert "Database is reachable" in result.output

    def test_serve_uses_configured_address(self):
        with patch("src.bookshelf.cli.server_commands.uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "8123"])

        assert result.exit_code == 0, result.output
        args, kwargs = run.call_args
        assert args == ("src.bookshelf.api.http.app:app",)
        assert kwargs["port"] == 8123
        assert kwargs["host"] == "localhost"
        assert kwargs["reload"] is False
