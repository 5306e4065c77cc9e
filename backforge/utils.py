"""Shared utility functions for BackForge.

Provides async command execution, async file writes, a name-case helper and
Rich-based console reporting.  Every user-facing message goes through the
module-level ``console`` (stdout) or ``error_console`` (stderr).
"""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
error_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to exit.

    Args:
        cmd: Program and arguments.  No shell is involved.
        cwd: Working directory for the child process.  The parent's working
            directory is never changed.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams and the child's output goes straight to the
            terminal).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def write_file_async(path: Path, content: str) -> Path:
    """Write *content* to *path* off the event loop and return the path."""
    await asyncio.to_thread(write_file, path, content)
    return path


async def ensure_dirs(paths: list[Path]) -> list[Path]:
    """Create every directory in *paths* concurrently.

    Creation is idempotent: directories that already exist are left alone.
    """

    async def _mkdir(p: Path) -> Path:
        await asyncio.to_thread(p.mkdir, parents=True, exist_ok=True)
        return p

    return list(await asyncio.gather(*[_mkdir(p) for p in paths]))


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word.capitalize() for word in parts if word)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the tool banner."""
    body = f"[bold bright_cyan]{title}[/bold bright_cyan]"
    if subtitle:
        body += f"\n{subtitle}"
    console.print(Panel(body, border_style="bright_cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Option", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
