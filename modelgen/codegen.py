"""Render templates and write generated output.

Takes the context from context_builder and produces one model file per table.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .errors import RenderError, WriteError
from .mapper import map_table
from .models import ColumnDescriptor

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "model.go.j2"


class Renderer:
    """Render a single model template.

    The template is injected by directory and name so an alternate template
    can replace the bundled one.
    """

    def __init__(self, template_dir: Path = TEMPLATE_DIR, template_name: str = DEFAULT_TEMPLATE):
        self.template_dir = Path(template_dir)
        self.template_name = template_name
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )

    @classmethod
    def from_path(cls, path: Path | str | None) -> "Renderer":
        """Build a renderer for a template file, or the bundled one for None."""
        if path is None:
            return cls()
        path = Path(path)
        return cls(path.parent, path.name)

    def render(self, context: dict[str, Any]) -> str:
        try:
            template = self.env.get_template(self.template_name)
        except jinja2.TemplateNotFound as e:
            raise RenderError(
                f"Template '{self.template_name}' not found in {self.template_dir}"
            ) from e
        except jinja2.TemplateSyntaxError as e:
            raise RenderError(f"Failed to parse template: {e}") from e

        try:
            return template.render(**context)
        except jinja2.TemplateError as e:
            raise RenderError(f"Failed to render template: {e}") from e


def write_model(text: str, dest: Path | str, type_name: str, extension: str = "go") -> Path:
    """Write rendered text to <dest>/<type_name>.<extension>."""
    output_path = Path(dest) / f"{type_name}.{extension}"
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Failed to create file {output_path}: {e}") from e
    return output_path


def generate_table(
    table_name: str,
    columns: Iterable[ColumnDescriptor],
    config: GeneratorConfig,
    renderer: Renderer,
) -> Path:
    """Map, render and write one table. Returns the written path."""
    table = map_table(table_name, columns, strict=config.strict_types)
    context = build_context(table, package=config.package)
    output = renderer.render(context)
    output_path = write_model(output, config.dest, table.type_name, config.extension)

    logger.info(
        "Generated %s (%d fields) for table %s",
        output_path, context["field_count"], table_name,
    )
    return output_path


def generate(
    config: GeneratorConfig,
    get_columns: Callable[[str], list[ColumnDescriptor]],
    renderer: Renderer | None = None,
) -> list[Path]:
    """Generate a model for every configured table, in order.

    The first error aborts the run; files written before it stay on disk.
    """
    renderer = renderer or Renderer.from_path(config.template)
    written: list[Path] = []
    for table_name in config.tables:
        columns = get_columns(table_name)
        written.append(generate_table(table_name, columns, config, renderer))
    return written
