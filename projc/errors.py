"""Exceptions raised for conditions that abort a projc run."""

from __future__ import annotations


class ProjcError(Exception):
    """Base class for fatal projc errors."""


class UsageError(ProjcError):
    """Raised when the command line has the wrong shape."""


class PathResolutionError(ProjcError):
    """Raised when a target path or project name cannot be determined."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")
