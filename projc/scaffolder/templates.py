"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``projc/scaffolder/templates/`` directory and renders them with the project
name.  Templates are chosen by the extension of the file being generated;
both Makefile variants share one template.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from projc.utils import to_upper_ascii


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

HEADER_TEMPLATE = "header.h.j2"
SOURCE_TEMPLATE = "source.c.j2"
FALLBACK_TEMPLATE = "fallback.j2"
MAKEFILE_TEMPLATE = "Makefile.j2"

_TEMPLATES_BY_EXTENSION: dict[str, str] = {
    ".h": HEADER_TEMPLATE,
    ".c": SOURCE_TEMPLATE,
}


def template_for(extension: str) -> str:
    """Return the template used for a generated file with *extension*."""
    return _TEMPLATES_BY_EXTENSION.get(extension, FALLBACK_TEMPLATE)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are rendered byte-exactly: trailing newlines are kept as they
    appear in the ``.j2`` file and nothing is escaped.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
        )
        self.env.filters["upper_ascii"] = to_upper_ascii

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Name relative to the template directory (e.g.
                ``"header.h.j2"``).
            context: Variables available inside the template; every shipped
                template expects ``project``.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to a new file.

        Raises:
            FileExistsError: If *output_path* is already present.
            OSError: If the file cannot be created or written.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        _write_new_file(out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_new_file(path: Path, content: str) -> None:
    """Create *path* exclusively and write *content* to it."""
    # No newline translation, so output is byte-exact on Windows too.
    with open(path, "x", encoding="utf-8", newline="") as handle:
        handle.write(content)
