"""Shared helpers: Rich console output and small file-system utilities."""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for *path*.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def relative_path(path: str | Path, start: str | Path | None = None) -> str:
    """Render *path* as ``./<relative>`` from *start* (default: the cwd).

    Examples::

        relative_path("/work/src/components/Button", "/work")
            -> "./src/components/Button"
    """
    base = Path(start) if start is not None else Path.cwd()
    return f"./{Path(os.path.relpath(path, base)).as_posix()}"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message (to *out*, default: stdout)."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")
