"""projc -- scaffolds a C project layout with sources and Makefiles.

Quick usage::

    from projc.config import ScaffoldConfig
    from projc.scaffolder import ProjectScaffolder

    config = ScaffoldConfig(project_name="foo", target_dir="/tmp/foo")
    report = ProjectScaffolder(config).scaffold()
"""

__version__ = "0.1.0"
