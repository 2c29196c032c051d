"""Shared utility functions for Project Starter.

Provides Rich-based console reporting and the small file-system helpers used
around a generation run: resetting the destination, walking the template
tree, atomic writes and toggling the executable bit.
"""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def reset_dir(path: str | Path) -> Path:
    """Delete *path* if it exists and recreate it empty.

    Raises:
        OSError: If the directory cannot be removed or created.
    """
    dir_path = Path(path)
    if dir_path.is_dir() and not dir_path.is_symlink():
        shutil.rmtree(dir_path)
    elif dir_path.exists() or dir_path.is_symlink():
        dir_path.unlink()
    dir_path.mkdir(parents=True)
    return dir_path


def list_files(root: str | Path) -> Iterator[Path]:
    """Yield every regular file under *root*.

    Directories are visited in sorted order so that repeated runs over the
    same tree report files in the same sequence.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = Path(dirpath) / name
            if candidate.is_file():
                yield candidate


def read_text_exact(path: Path) -> str:
    """Read UTF-8 text without translating line endings."""
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def file_mode(path: Path) -> int:
    """Return the permission bits of *path*."""
    return stat.S_IMODE(path.stat().st_mode)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to *path* through a temporary file in the same directory.

    The destination either keeps its previous state or holds the complete
    new content; a partially written file is never left behind.

    Args:
        path: Destination file path.
        text: Text content, written as-is.
        mode: File permissions (octal).
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def make_executable(path: str | Path) -> None:
    """Set the executable bit on a file for user, group and others."""
    file_path = Path(path)
    current = file_path.stat().st_mode
    file_path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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
    console.print(f"[bold green]{escape(message)}[/bold green]", highlight=False)


def print_error(message: str, error: BaseException | None = None) -> None:
    """Print a red error message, followed by *error* when given."""
    console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)
    if error is not None:
        console.print(f"  [red]{type(error).__name__}: {escape(str(error))}[/red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False)
