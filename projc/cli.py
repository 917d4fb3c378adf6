"""Command-line entry point for projc.

Usage::

    projc              # scaffold the current directory, named after it
    projc widget       # scaffold ./widget as project "widget"
    python -m projc ../libfoo
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from projc import __version__
from projc.config import ScaffoldConfig
from projc.errors import PathResolutionError, UsageError
from projc.scaffolder import ProjectScaffolder
from projc.utils import (
    derive_trailing_component,
    ensure_dir,
    exists,
    print_error,
    print_header,
    resolve_absolute,
)


def build_config(project: str | None) -> ScaffoldConfig:
    """Work out the project name and target directory.

    With no *project* the current directory is scaffolded and named after
    its last path component.  Otherwise *project* is used verbatim as the
    name and its absolute form as the target.

    Raises:
        PathResolutionError: If no absolute path or name can be derived.
    """
    if project is None:
        target = resolve_absolute(".")
        name = derive_trailing_component(target)
    else:
        if not project:
            raise PathResolutionError(project, "Empty project path")
        target = resolve_absolute(project)
        name = project
    return ScaffoldConfig(project_name=name, target_dir=target)


def prepare_target(target: Path) -> None:
    """Create the target directory when an explicit path does not exist yet."""
    if exists(target):
        return
    try:
        ensure_dir(target)
    except OSError as exc:
        raise PathResolutionError(str(target), f"Cannot create target directory ({exc.strerror})") from exc


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``projc`` and ``python -m projc``."""
    parser = argparse.ArgumentParser(
        prog="projc",
        description="Scaffold a C project with lib/src/test/include and Makefiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  projc            scaffold the current directory\n"
            "  projc widget     scaffold ./widget as project 'widget'\n"
        ),
    )
    parser.add_argument(
        "project",
        nargs="?",
        default=None,
        metavar="project-path",
        help="Project directory; its text is also the project name (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args, extra = parser.parse_known_args(argv)
    project = args.project
    if project is None and len(extra) == 1 and extra[0].startswith("-"):
        # A lone dash-prefixed argument is a project name, not an option.
        project, extra = extra[0], []

    try:
        if extra:
            raise UsageError(f"Unexpected arguments: {' '.join(extra)}")
        config = build_config(project)
        if project is not None:
            prepare_target(config.target_dir)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print_error(f"Error: {exc}")
        sys.exit(1)
    except PathResolutionError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_header(f"{config.project_name} -> {config.target_dir}")
    ProjectScaffolder(config).scaffold()


if __name__ == "__main__":
    main()
