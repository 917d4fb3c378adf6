"""projc configuration.

Typed description of one scaffold run. The layout itself is fixed; only the
project name and the target directory vary between runs.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DIRECTORIES: tuple[str, ...] = ("lib", "src", "test", "include")
MAKEFILES: tuple[str, ...] = ("Makefile", "Makefile.win")


class ScaffoldConfig(BaseModel):
    """Everything the scaffolder needs to lay out one project.

    Instances are created by the CLI entry point once the project name and
    target directory have been worked out, then handed to
    ``ProjectScaffolder``.
    """

    project_name: str = Field(..., description="Name embedded in file names and contents")
    target_dir: Path = Field(..., description="Absolute root the tree is created under")
    directories: tuple[str, ...] = Field(default=DIRECTORIES)
    makefiles: tuple[str, ...] = Field(default=MAKEFILES)

    @field_validator("project_name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("project_name must not be empty")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def directory_paths(self) -> dict[str, Path]:
        """Subdirectories of the target keyed by name, in creation order."""
        return {name: self.target_dir / name for name in self.directories}

    @property
    def makefile_paths(self) -> list[Path]:
        """Build files at the root, in creation order."""
        return [self.target_dir / name for name in self.makefiles]
