"""Console report for a generated component: a success line and a file tree."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .generator import GenerationResult
from .utils import console as default_console, print_success


def _has_files(directory: Path) -> bool:
    return any(child.is_file() for child in directory.rglob("*"))


def list_generated_files(path: str | Path) -> list[Path]:
    """Return the contents of *path*, relative to it, sorted.

    Directories that contain no files (at any depth) are left out.
    """
    root = Path(path)
    entries: list[Path] = []
    for child in sorted(root.rglob("*")):
        if child.is_dir() and not _has_files(child):
            continue
        entries.append(child.relative_to(root))
    return entries


def build_tree(path: str | Path) -> Tree:
    """Build a Rich tree of the non-empty contents of *path*."""
    root = Path(path)
    tree = Tree(f"[bold blue]{escape(root.name)}[/bold blue]", guide_style="dim")
    branches: dict[Path, Tree] = {Path("."): tree}

    for entry in list_generated_files(root):
        parent = branches[entry.parent]
        if (root / entry).is_dir():
            branches[entry] = parent.add(f"[bold blue]{escape(entry.name)}[/bold blue]")
        else:
            parent.add(escape(entry.name))
    return tree


def print_report(result: GenerationResult, console: Console | None = None) -> None:
    """Print ``Generated <Component>:`` followed by the directory tree."""
    print_success(f"Generated [cyan]{escape(result.component_name)}[/cyan]:", console)
    out = console or default_console
    out.print()
    out.print(build_tree(result.component_path))
