"""Shared utility functions for create-frontend-setup.

Provides async command execution, file-system helpers and Rich-based
progress reporting.  Nothing here knows about package managers or
templates; those live in :mod:`create_frontend_setup.scaffolder`.
"""

from __future__ import annotations

import asyncio
import shlex
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdin/stdout/stderr so interactive
    prompts and progress output from package managers stay visible.  There
    is no timeout.

    Args:
        cmd: Program followed by its arguments.
        cwd: Working directory for the child process.

    Returns:
        The process exit code.

    Raises:
        OSError: If the program cannot be spawned (e.g. not on ``PATH``).
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


def format_command(cmd: list[str]) -> str:
    """Render an argument list the way a user would type it in a shell."""
    return " ".join(shlex.quote(part) for part in cmd)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* is a directory with no entries."""
    return not any(Path(path).iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, rows: dict[str, str]) -> None:
    """Print a framed key/value banner at the start of a run."""
    width = max((len(k) for k in rows), default=0)
    body = "\n".join(
        f"{escape(key.ljust(width))} : {escape(value)}" for key, value in rows.items()
    )
    console.print(
        Panel(
            body,
            title=f"[bold]{title}[/bold]",
            border_style="bright_cyan",
        )
    )


def print_stage_header(index: int, total: int, name: str) -> None:
    """Print a full-width rule announcing a scaffolding stage."""
    console.print()
    console.print(Rule(f"[bold bright_green] [{index}/{total}] {name} [/bold bright_green]", style="bright_green"))


def print_command(cmd: list[str], cwd: str | Path | None = None) -> None:
    """Echo a command line before it is executed."""
    where = f"  [dim](in {escape(str(cwd))})[/dim]" if cwd else ""
    console.print(f"[dim]$ {escape(format_command(cmd))}[/dim]{where}", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr without wrapping it."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
