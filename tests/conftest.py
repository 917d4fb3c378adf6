"""Shared pytest fixtures for the projc test suite.

Provides reusable fixtures for:
- Temporary target directories
- Ready-made scaffold configurations and scaffolders
- The expected artifact layout of a scaffold
"""

from __future__ import annotations

from pathlib import Path

import pytest

from projc.config import ScaffoldConfig
from projc.scaffolder import ProjectScaffolder


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Existing, empty target directory named ``foo``."""
    project_dir = tmp_path / "foo"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# Scaffolding
# ---------------------------------------------------------------------------

@pytest.fixture
def foo_config(tmp_project_dir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(project_name="foo", target_dir=tmp_project_dir)


@pytest.fixture
def scaffolder(foo_config: ScaffoldConfig) -> ProjectScaffolder:
    return ProjectScaffolder(foo_config)


def expected_artifacts(project: str) -> list[str]:
    """Relative paths every complete scaffold of *project* contains."""
    return [
        "include",
        "lib",
        "src",
        "test",
        f"lib/{project}.h",
        f"lib/{project}.c",
        f"src/{project}_app.c",
        f"test/{project}_test.c",
        "Makefile",
        "Makefile.win",
    ]


@pytest.fixture
def expected_layout():
    return expected_artifacts
