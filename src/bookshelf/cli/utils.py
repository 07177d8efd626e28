"""Shared helpers for CLI commands."""

from rich.console import Console

console = Console()
