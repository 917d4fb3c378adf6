"""Shared utility functions for projc.

Provides path helpers (absolute resolution, trailing-component extraction,
ASCII uppercasing, path-length limits), the two filesystem primitives the
scaffolder is built on, and Rich-based console reporting.
"""

from __future__ import annotations

import os
import string
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from projc.errors import PathResolutionError

console = Console(soft_wrap=True)

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

WINDOWS_PATH_MAX = 260
DEFAULT_PATH_MAX = 4096

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def resolve_absolute(path: str | Path) -> Path:
    """Return the fully-resolved absolute form of *path*.

    Relative paths are resolved against the current working directory and
    symlinks are followed.  The path does not need to exist.

    Raises:
        PathResolutionError: If the host cannot canonicalise the path.
    """
    try:
        return Path(path).resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise PathResolutionError(str(path), f"Cannot resolve path ({exc})") from exc


def derive_trailing_component(path: str | Path, separator: str = os.sep) -> str:
    """Return the text after the last *separator* in *path*.

    Examples::

        derive_trailing_component("/home/me/widget") -> "widget"
        derive_trailing_component("work:widget", ":") -> "widget"

    Raises:
        PathResolutionError: If *separator* does not occur in *path* or
            nothing follows it (e.g. the filesystem root).
    """
    text = str(path)
    index = text.rfind(separator)
    if index == -1:
        raise PathResolutionError(text, "No path separator found")
    name = text[index + len(separator):]
    if not name:
        raise PathResolutionError(text, "Path has no trailing component")
    return name


def to_upper_ascii(text: str) -> str:
    """Uppercase ASCII letters only; every other character is left as-is."""
    return text.translate(_ASCII_UPPER)


def path_max(path: str | Path) -> int:
    """Return the path-length limit of the filesystem holding *path*."""
    if sys.platform == "win32":
        return WINDOWS_PATH_MAX
    try:
        return os.pathconf(path, "PC_PATH_MAX")
    except (OSError, ValueError):
        return DEFAULT_PATH_MAX


def exceeds_path_max(path: str | Path, limit: int) -> bool:
    """Return ``True`` if *path* does not fit in a *limit*-sized buffer."""
    # The limit counts the terminating NUL of the native representation.
    return len(os.fsencode(path)) >= limit


# ---------------------------------------------------------------------------
# File-system primitives
# ---------------------------------------------------------------------------


def exists(path: str | Path) -> bool:
    """Return ``True`` if a file or directory is present at *path*."""
    return os.path.lexists(path)


def make_directory(path: str | Path) -> None:
    """Create a single directory, tolerating one that is already there.

    Unlike :func:`ensure_dir` no parents are created: a missing parent
    raises ``FileNotFoundError``.
    """
    Path(path).mkdir(exist_ok=True)


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing the scaffold target."""
    console.print(Rule(f"[bold cyan]{escape(title)}[/bold cyan]", style="cyan"))


def print_step(message: str) -> None:
    """Print a plain progress line."""
    console.print(escape(message))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
