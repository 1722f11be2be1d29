"""Rich console output utilities for the workspace publish CLI."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from schemas.workspace import RepoDisplay

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}")


def print_key_value(key: str, value: Any, key_style: str = "bold") -> None:
    """Print a key-value pair."""
    console.print(f"[{key_style}]{key}:[/{key_style}] {value}")


def print_section(name: str, section: Any) -> None:
    """Print one config section as a key/value table."""
    console.print(f"\n[bold][{name}][/bold]")

    table = Table(show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in vars(section).items():
        if key.startswith("_"):
            continue
        value_str = str(value)
        if len(value_str) > 60:
            value_str = value_str[:57] + "..."
        table.add_row(key, value_str)

    console.print(table)


def print_repo_display(display: RepoDisplay, project_id: str | None, file_count: int) -> None:
    """Print the repo info area as a table."""
    table = Table(show_header=False, title="Repository")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("project", project_id or "[dim]none[/dim]")
    if display.has_repo:
        table.add_row("repo", display.label)
        table.add_row("url", display.url or "[dim]none[/dim]")
    else:
        table.add_row("repo", f"[dim]{display.label}[/dim]")
    table.add_row("branch", display.branch)
    table.add_row("files", str(file_count))

    console.print(table)


def create_spinner(description: str = "Working...") -> Progress:
    """Create a simple spinner for indeterminate progress."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib logging through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )
