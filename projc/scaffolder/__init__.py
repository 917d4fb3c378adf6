"""projc scaffolder -- lays out a C project tree from Jinja2 templates.

Quick usage::

    from projc.config import ScaffoldConfig
    from projc.scaffolder import ProjectScaffolder

    report = ProjectScaffolder(
        ScaffoldConfig(project_name="foo", target_dir="/tmp/foo")
    ).scaffold()
"""

from projc.scaffolder.generator import (
    ProjectScaffolder,
    ScaffoldReport,
    StepKind,
    StepResult,
    StepStatus,
)
from projc.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectScaffolder",
    "ScaffoldReport",
    "StepKind",
    "StepResult",
    "StepStatus",
    "TemplateRenderer",
]
