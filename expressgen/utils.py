"""Shared utility functions for expressgen.

Provides async command execution, file-system helpers and Rich-based
console output.  All user-facing text goes through the module-level
``console`` so tests can swap it out.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdout and stderr, so the user sees the
    tool's own output as it happens.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The process exit code.

    Raises:
        FileNotFoundError: If the program does not exist on ``PATH``.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=None,
        stderr=None,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def write_text(path: Path, content: str) -> None:
    """Synchronous helper: write *content* to *path*, replacing any old file."""
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a progress line for one generator step."""
    console.print(f"[cyan]>[/cyan] {escape(message)}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
