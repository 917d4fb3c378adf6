"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and lays out a C project under its target
directory: the ``lib``/``src``/``test``/``include`` tree, one header and
three sources, and the two Makefiles.  Nothing that already exists is
touched; every step is reported and no step's failure stops the rest.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from projc.config import ScaffoldConfig
from projc.utils import (
    exceeds_path_max,
    exists,
    make_directory,
    path_max,
    print_error,
    print_step,
    print_success,
    print_warning,
)

from .templates import MAKEFILE_TEMPLATE, TemplateRenderer, template_for


# ---------------------------------------------------------------------------
# Generated source files: (directory, name suffix, extension), in order
# ---------------------------------------------------------------------------

SOURCE_FILES: tuple[tuple[str, str, str], ...] = (
    ("lib", "", ".h"),
    ("lib", "", ".c"),
    ("src", "_app", ".c"),
    ("test", "_test", ".c"),
)


# ---------------------------------------------------------------------------
# Step results
# ---------------------------------------------------------------------------


class StepKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    MAKEFILE = "makefile"


class StepStatus(str, Enum):
    CREATED = "created"
    EXISTS = "exists"
    TOO_LONG = "too_long"
    FAILED = "failed"


class StepResult(BaseModel):
    """Outcome of creating one directory or file."""

    kind: StepKind
    path: Path
    status: StepStatus
    detail: str = Field(default="", description="OS error message when status is 'failed'")

    @property
    def created(self) -> bool:
        return self.status is StepStatus.CREATED


class ScaffoldReport(BaseModel):
    """Every step of one scaffold run, in execution order."""

    project_name: str
    target_dir: Path
    steps: list[StepResult] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def created_count(self) -> int:
        return sum(1 for step in self.steps if step.created)

    @computed_field  # type: ignore[misc]
    @property
    def skipped_count(self) -> int:
        return len(self.steps) - self.created_count

    def by_status(self, status: StepStatus) -> list[StepResult]:
        """Return the steps that ended with *status*."""
        return [step for step in self.steps if step.status is status]


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Creates the directory tree, sources and Makefiles for one project.

    Args:
        config: Project name and target directory.
        renderer: Template renderer; a default one is built if omitted.
        path_limit: Path-length limit to enforce.  Defaults to the limit of
            the filesystem holding the target directory.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
        path_limit: int | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self._path_limit = path_limit

    @property
    def path_limit(self) -> int:
        if self._path_limit is None:
            self._path_limit = path_max(self.config.target_dir)
        return self._path_limit

    # -- Public API --------------------------------------------------------

    def scaffold(self) -> ScaffoldReport:
        """Run every step: directories, then sources, then Makefiles."""
        report = ScaffoldReport(
            project_name=self.config.project_name,
            target_dir=self.config.target_dir,
        )
        report.steps.extend(self.create_tree())
        report.steps.extend(self.create_files())
        report.steps.extend(self.create_makes())

        print_step(
            f"Scaffolded {report.project_name} in {report.target_dir}: "
            f"{report.created_count} created, {report.skipped_count} skipped."
        )
        return report

    def create_tree(self) -> list[StepResult]:
        """Create ``lib``, ``src``, ``test`` and ``include`` in that order."""
        results: list[StepResult] = []
        for dirname, path in self.config.directory_paths.items():
            print_step(f"Creating {dirname} directory...")
            result = self.create_dir(path)
            if result.created:
                print_success(f"Directory {dirname} created.")
            elif result.status is StepStatus.EXISTS:
                print_warning(f"Failed to create {dirname} directory. Directory already exists.")
            elif result.status is StepStatus.TOO_LONG:
                print_error(f"Failed to create {dirname} directory. Path exceeds {self.path_limit} bytes.")
            else:
                print_error(f"Failed to create {dirname} directory: {result.detail}")
            results.append(result)
        return results

    def create_files(self) -> list[StepResult]:
        """Create the header, library, application and test sources."""
        project = self.config.project_name
        directories = self.config.directory_paths
        results: list[StepResult] = []
        for dirname, suffix, extension in SOURCE_FILES:
            filename = f"{project}{suffix}{extension}"
            print_step(f"Creating file {filename} in {dirname} directory...")
            result = self.touch(directories[dirname], f"{project}{suffix}", extension)
            if result.created:
                print_success(f"{filename} created in {dirname}")
            else:
                print_error(f"Failed to create {filename} in {dirname}{_reason(result)}")
            results.append(result)
        return results

    def create_makes(self) -> list[StepResult]:
        """Create ``Makefile`` and ``Makefile.win`` at the target root."""
        results: list[StepResult] = []
        for path in self.config.makefile_paths:
            makename = path.name
            print_step(f"Creating {makename}...")
            result = self.makefile_create(path)
            if result.created:
                print_success(f"{makename} was created.")
            elif result.status is StepStatus.EXISTS:
                print_warning(f"Failed to create {makename}; {makename} may already exist.")
            else:
                print_error(f"Failed to create {makename}{_reason(result)}")
            results.append(result)
        return results

    # -- Single steps ------------------------------------------------------

    def create_dir(self, path: Path) -> StepResult:
        """Create one subdirectory of the target unless it already exists."""
        status = self._precheck(path)
        if status is not None:
            return StepResult(kind=StepKind.DIRECTORY, path=path, status=status)
        try:
            make_directory(path)
        except OSError as exc:
            return _failed(StepKind.DIRECTORY, path, exc)
        return StepResult(kind=StepKind.DIRECTORY, path=path, status=StepStatus.CREATED)

    def touch(self, directory: Path, stem: str, extension: str) -> StepResult:
        """Create ``<directory>/<stem><extension>`` from its template.

        The template is picked by *extension*; the project name, not
        *stem*, is interpolated into it.
        """
        path = directory / f"{stem}{extension}"
        return self._render_new(StepKind.FILE, path, template_for(extension))

    def makefile_create(self, path: Path) -> StepResult:
        """Create one Makefile variant at *path*."""
        return self._render_new(StepKind.MAKEFILE, path, MAKEFILE_TEMPLATE)

    # -- Internal ----------------------------------------------------------

    def _precheck(self, path: Path) -> StepStatus | None:
        if exceeds_path_max(path, self.path_limit):
            return StepStatus.TOO_LONG
        if exists(path):
            return StepStatus.EXISTS
        return None

    def _render_new(self, kind: StepKind, path: Path, template: str) -> StepResult:
        status = self._precheck(path)
        if status is not None:
            return StepResult(kind=kind, path=path, status=status)
        try:
            self.renderer.render_to_file(
                template, path, {"project": self.config.project_name}
            )
        except FileExistsError:
            return StepResult(kind=kind, path=path, status=StepStatus.EXISTS)
        except OSError as exc:
            return _failed(kind, path, exc)
        return StepResult(kind=kind, path=path, status=StepStatus.CREATED)


def _failed(kind: StepKind, path: Path, exc: OSError) -> StepResult:
    return StepResult(
        kind=kind,
        path=path,
        status=StepStatus.FAILED,
        detail=exc.strerror or str(exc),
    )


def _reason(result: StepResult) -> str:
    if result.status is StepStatus.EXISTS:
        return " (already exists)"
    if result.status is StepStatus.TOO_LONG:
        return " (path too long)"
    return f" ({result.detail})" if result.detail else ""
